from enum import Enum


class GraphType(str, Enum):
    UNDIRECTED = "graph"
    DIRECTED = "digraph"
    SUB = "subgraph"


class EdgeType(str, Enum):
    DIRECTED = "->"
    UNDIRECTED = "--"


class DirType(str, Enum):
    FORWARD = "forward"
    BACK = "back"
    BOTH = "both"
    NONE = "none"


class Shape(str, Enum):
    BOX = "box"
    CROW = "crow"
    CURVE = "curve"
    ICURVE = "icurve"
    DIAMOND = "diamond"
    DOT = "dot"
    INV = "inv"
    NONE = "none"
    NORMAL = "normal"
    TEE = "tee"
    VEE = "vee"


class Splines(str, Enum):
    NONE = "none"
    FALSE = "false"
    LINE = "line"
    TRUE = "true"
    SPLINE = "spline"
    POLYLINE = "polyline"
    ORTHO = "ortho"
    CURVED = "curved"


class ClusterMode(str, Enum):
    LOCAL = "local"
    GLOBAL = "global"
    NONE = "none"


class Key(str, Enum):
    """Graphviz attribute names."""

    BACKGROUND = "_background"
    AREA = "area"
    ARROW_HEAD = "arrowhead"
    ARROW_SIZE = "arrowsize"
    ARROW_TAIL = "arrowtail"
    BB = "bb"
    BGCOLOR = "bgcolor"
    CENTER = "center"
    CHARSET = "charset"
    CLASS = "class"
    CLUSTER_RANK = "clusterrank"
    COLOR = "color"
    COLOR_SCHEME = "colorscheme"
    COMMENT = "comment"
    COMPOUND = "compound"
    CONCENTRATE = "concentrate"
    CONSTRAINT = "constraint"
    DAMPING = "Damping"
    DECORATE = "decorate"
    DEFAULT_DIST = "defaultdist"
    DIM = "dim"
    DIMEN = "dimen"
    DIR = "dir"
    DIR_EDGE_CONSTRAINTS = "diredgeconstraints"
    DISTORTION = "distortion"
    DPI = "dpi"
    EDGE_HREF = "edgehref"
    EDGE_TARGET = "edgetarget"
    EDGE_TOOLTIP = "edgetooltip"
    EDGE_URL = "edgeURL"
    EPSILON = "epsilon"
    ESEP = "esep"
    FILL_COLOR = "fillcolor"
    FIXED_SIZE = "fixedsize"
    FONT_COLOR = "fontcolor"
    FONT_NAME = "fontname"
    FONT_NAMES = "fontnames"
    FONT_PATH = "fontpath"
    FONT_SIZE = "fontsize"
    FORCE_LABELS = "forcelabels"
    GRADIENT_ANGLE = "gradientangle"
    GROUP = "group"
    HEAD_LP = "head_lp"
    HEAD_CLIP = "headclip"
    HEAD_HREF = "headhref"
    HEAD_LABEL = "headlabel"
    HEAD_PORT = "headport"
    HEAD_TARGET = "headtarget"
    HEAD_TOOLTIP = "headtooltip"
    HEAD_URL = "headURL"
    HEIGHT = "height"
    HREF = "href"
    ID = "id"
    IMAGE = "image"
    IMAGE_PATH = "imagepath"
    IMAGE_POS = "imagepos"
    IMAGE_SCALE = "imagescale"
    INPUT_SCALE = "inputscale"
    K = "K"
    LABEL = "label"
    LABEL_SCHEME = "label_scheme"
    LABEL_ANGLE = "labelangle"
    LABEL_DISTANCE = "labeldistance"
    LABEL_FLOAT = "labelfloat"
    LABEL_FONT_COLOR = "labelfontcolor"
    LABEL_FONT_NAME = "labelfontname"
    LABEL_FONT_SIZE = "labelfontsize"
    LABEL_HREF = "labelhref"
    LABEL_JUST = "labeljust"
    LABEL_LOC = "labelloc"
    LABEL_TARGET = "labeltarget"
    LABEL_TOOLTIP = "labeltooltip"
    LABEL_URL = "labelURL"
    LANDSCAPE = "landscape"
    LAYER = "layer"
    LAYER_LIST_SEP = "layerlistsep"
    LAYERS = "layers"
    LAYER_SELECT = "layerselect"
    LAYER_SEP = "layersep"
    LAYOUT = "layout"
    LEN = "len"
    LEVELS = "levels"
    LEVELS_GAP = "levelsgap"
    LHEAD = "lhead"
    LHEIGHT = "lheight"
    LP = "lp"
    LTAIL = "ltail"
    LWIDTH = "lwidth"
    MARGIN = "margin"
    MAX_ITER = "maxiter"
    MCLIMIT = "mclimit"
    MINDIST = "mindist"
    MINLEN = "minlen"
    MODE = "mode"
    MODEL = "model"
    MOSEK = "mosek"
    NEWRANK = "newrank"
    NODESEP = "nodesep"
    NOJUSTIFY = "nojustify"
    NORMALIZE = "normalize"
    NOTRANSLATE = "notranslate"
    NSLIMIT = "nslimit"
    NSLIMIT1 = "nslimit1"
    ORDERING = "ordering"
    ORIENTATION = "orientation"
    OUTPUT_ORDER = "outputorder"
    OVERLAP = "overlap"
    OVERLAP_SCALING = "overlap_scaling"
    OVERLAP_SHRINK = "overlap_shrink"
    PACK = "pack"
    PACK_MODE = "packmode"
    PAD = "pad"
    PAGE = "page"
    PAGE_DIR = "pagedir"
    PEN_COLOR = "pencolor"
    PEN_WIDTH = "penwidth"
    PERIPHERIES = "peripheries"
    PIN = "pin"
    POS = "pos"
    QUADTREE = "quadtree"
    QUANTUM = "quantum"
    RANK = "rank"
    RANKDIR = "rankdir"
    RANKSEP = "ranksep"
    RATIO = "ratio"
    RECTS = "rects"
    REGULAR = "regular"
    REMINCROSS = "remincross"
    REPULSIVE_FORCE = "repulsiveforce"
    RESOLUTION = "resolution"
    ROOT = "root"
    ROTATE = "rotate"
    ROTATION = "rotation"
    SAMEHEAD = "samehead"
    SAMETAIL = "sametail"
    SAMPLE_POINTS = "samplepoints"
    SCALE = "scale"
    SEARCH_SIZE = "searchsize"
    SEP = "sep"
    SHAPE = "shape"
    SHAPE_FILE = "shapefile"
    SHOW_BOXES = "showboxes"
    SIDES = "sides"
    SIZE = "size"
    SKEW = "skew"
    SMOOTHING = "smoothing"
    SORTV = "sortv"
    SPLINES = "splines"
    START = "start"
    STYLE = "style"
    STYLESHEET = "stylesheet"
    TAIL_LP = "tail_lp"
    TAIL_CLIP = "tailclip"
    TAIL_HREF = "tailhref"
    TAIL_LABEL = "taillabel"
    TAIL_PORT = "tailport"
    TAIL_TARGET = "tailtarget"
    TAIL_TOOLTIP = "tailtooltip"
    TAIL_URL = "tailURL"
    TARGET = "target"
    TOOLTIP = "tooltip"
    TRUECOLOR = "truecolor"
    URL = "URL"
    VERTICES = "vertices"
    VIEWPORT = "viewport"
    VORO_MARGIN = "voro_margin"
    WEIGHT = "weight"
    WIDTH = "width"
    XDOT_VERSION = "xdotversion"
    XLABEL = "xlabel"
    XLP = "xlp"
    Z = "z"


CLUSTER_PREFIX = "cluster_"
GENERATED_ID = "-"
