import io

import pytest

from dotgraph import WriteError, new_graph
from dotgraph.formatters import IndentedWriter, PrettyWriter, prettify
from dotgraph.samples import cluster_sample

from test_write import TEST_GRAPH, build_test_graph

PRETTY_TEST_GRAPH = """\
strict digraph "test-graph" {
  graph [label="test-graph"];
  subgraph {
    "n1";
    "n2";
    {
      rank=same;
      "n1";
      "n2";
    }
    "n1"->"n2"[label="subgraph-edge"];
  }
  "n1"[label="node1"];
  "n2"[label="node2"];
  "n1"->"n2"[label="graph-edge"];
}
"""


class TestIndentedWriter:
    def test_new_line_indented_block(self):
        buffer = io.BytesIO()
        writer = IndentedWriter(buffer)

        writer.write_string("digraph {")
        with writer.new_line_indented():
            writer.write_string('"a";')
            writer.new_line()
            writer.write_string('"b";')
        writer.write_string("}")

        assert buffer.getvalue().decode() == 'digraph {\n\t"a";\n\t"b";\n}'

    def test_nested_indentation_and_custom_unit(self):
        buffer = io.BytesIO()
        writer = IndentedWriter(buffer, indent="  ")

        with writer.indented():
            with writer.indented():
                writer.new_line()
            writer.new_line()
        writer.back_indent()
        writer.new_line()

        assert buffer.getvalue() == b"\n    \n  \n"
        assert writer.level == 0

    def test_write_string_reports_what_the_sink_accepted(self):
        class OneByteSink:
            def write(self, data):
                return 1

        class SilentSink:
            def write(self, data):
                return None

        assert IndentedWriter(OneByteSink()).write_string("hello") == 1
        assert IndentedWriter(SilentSink()).write_string("héllo") == 6

    def test_write_passes_bytes_through(self):
        buffer = io.BytesIO()

        assert IndentedWriter(buffer).write(b"raw") == 3
        assert buffer.getvalue() == b"raw"


class TestPrettyWriter:
    def test_prettify_canonical_output(self):
        assert prettify(TEST_GRAPH) == PRETTY_TEST_GRAPH

    def test_graph_written_through_pretty_writer(self):
        buffer = io.BytesIO()
        writer = PrettyWriter(buffer)

        written = build_test_graph().write_to(writer)
        writer.flush()

        assert written == len(TEST_GRAPH)
        assert buffer.getvalue().decode() == PRETTY_TEST_GRAPH

    def test_short_write_on_destination_fails_the_graph_write(self):
        class OneByteSink:
            def __init__(self):
                self.data = bytearray()

            def write(self, data):
                self.data.extend(data[:1])
                return 1

        graph = new_graph()
        graph.node("n1").edge(graph.node("n2"))
        sink = OneByteSink()

        with pytest.raises(WriteError) as info:
            graph.write_to(PrettyWriter(sink))

        assert info.value.written == 0
        assert isinstance(info.value.cause, OSError)
        assert sink.data == b"d"

    def test_byte_by_byte_input_matches_single_write(self):
        data = cluster_sample().to_string().replace("Cluster A", "Clüster A").encode("utf-8")
        buffer = io.BytesIO()
        writer = PrettyWriter(buffer)

        for index in range(len(data)):
            assert writer.write(data[index:index + 1]) == 1
        writer.flush()

        assert buffer.getvalue().decode("utf-8") == prettify(data.decode("utf-8"))

    def test_quoted_and_html_ids_are_untouched(self):
        text = 'digraph {"a;{b}"[label=<<B>x;y</B>>];}'

        assert prettify(text) == 'digraph {\n  "a;{b}"[label=<<B>x;y</B>>];\n}\n'

    def test_existing_layout_is_normalized(self):
        text = "digraph {\n\n    a -> b;\n        c;\n}"

        assert prettify(text) == "digraph {\n  a -> b;\n  c;\n}\n"

    def test_comments_pass_through(self):
        text = "// header\ndigraph {/* a; b */ a;}"

        assert prettify(text) == "// header\ndigraph {\n  /* a; b */ a;\n}\n"

    def test_empty_block(self):
        assert prettify("digraph {}") == "digraph {\n}\n"

    def test_custom_indent(self):
        assert prettify('graph {"a";}', indent="\t") == 'graph {\n\t"a";\n}\n'
