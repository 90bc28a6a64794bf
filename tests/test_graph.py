from argmap import graph


def test_build_positional():
    g = graph.build(["one", "two"], {})
    assert "arg0 [label=one shape=plaintext]" in g.source
    assert "arg1 [label=two shape=plaintext]" in g.source
    assert "arg0 -> arg1" in g.source


def test_build_options():
    g = graph.build([], {"f": ["file.tgz"], "v": []})
    assert "key0 -> key0v0" in g.source
    assert '"file.tgz"' in g.source
    assert "#eeeeee" in g.source
    assert "key1 ->" not in g.source
