from dotgraph import Key, String, new_graph


def test_label_and_box():
    node = new_graph().node("n").label("Name").box()

    assert node.get_attribute(Key.LABEL) == String("Name")
    assert node.get_attribute_string(Key.SHAPE) == "box"


def test_edge_is_created_on_the_node_graph():
    graph = new_graph()
    sub = graph.subgraph(id="s")
    a = sub.node("a")
    b = graph.node("b")

    edge = a.edge(b)

    assert edge.graph is sub
    assert a.edges_to(b) == [edge]
    assert graph.find_edges(a, b) == []


def test_edge_with_attributes():
    graph = new_graph()
    a, b = graph.node("a"), graph.node("b")

    edge = a.edge_with_attributes(b, {"color": "red"})

    assert edge.get_attribute_string("color") == "red"
    assert a.edges_to(b) == [edge]


def test_write_to_node(chunk_sink):
    node = new_graph().node("n1").label("node1")

    assert node.write_to(chunk_sink) == len('"n1"[label="node1"];')
    assert chunk_sink.chunks == [b'"n1"', b'[label="node1"]', b";"]


def test_write_to_node_without_attributes(chunk_sink):
    new_graph().node("n1").write_to(chunk_sink)

    assert chunk_sink.chunks == [b'"n1"', b";"]


def test_styleable_helpers():
    node = new_graph().node("n")
    node.set_attribute_literal("width", "2")
    node.set_attribute_html(Key.XLABEL, "<I>x</I>")
    node.set_attributes_string({"tooltip": "tip"})

    assert node.has_attributes()
    assert set(node.get_attributes()) == {"width", "xlabel", "tooltip"}

    node.delete_attribute("width")
    assert node.get_attribute("width") is None
