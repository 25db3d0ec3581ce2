from io import StringIO

import pytest

from colonconf import Conf, ConfIOError, ConfParser, ConfSyntaxError, loads
from colonconf.conf.parser import ParseState, _LineMachine


def test_parse_ok_with_blank_lines(parse) -> None:
    conf = parse("item1: value1\n\n\nitem2: value2")
    assert conf.get_string("item1") == ("value1", None)
    assert conf.get_string("item2") == ("value2", None)


def test_parse_arrays(parse) -> None:
    conf = parse("[@int@;]: a;b;c\n[@int2]: 1 2 3")
    assert conf.get_string_array("int") == (["a", "b", "c"], None)
    assert conf.get_int_array("int2") == ([1, 2, 3], None)
    assert conf.get_item("int").value.raw_key == "[@int@;]"


def test_parse_trims_and_skips_comments(parse) -> None:
    conf = parse("# a comment\n  \t key \t:\t spaced value  \n   # indented\n")
    assert [i.key for i in conf.items()] == ["key"]
    assert conf.get_string("key") == ("spaced value", None)


def test_value_keeps_later_separators(parse) -> None:
    conf = parse("url: http://example.com:8080/x")
    assert conf.get_string("url") == ("http://example.com:8080/x", None)


def test_crlf_lines(parse) -> None:
    conf = parse("a: 1\r\n[S]\r\nb: 2\r\n")
    assert conf.get_int("a") == (1, None)
    assert conf.section_names() == ["S"]


def test_dangling_key_is_an_error() -> None:
    conf, err = loads("item1: valu\nitem1jfak")
    assert isinstance(err, ConfSyntaxError)
    assert err.lineno == 2
    assert err.line == "item1jfak"
    # committed lines stay in the partial result
    assert conf.has_item("item1")


def test_empty_value_is_an_error() -> None:
    _, err = loads("item1:  ")
    assert isinstance(err, ConfSyntaxError)
    assert "empty value" in str(err)


def test_empty_key_is_an_error() -> None:
    _, err = loads(": value")
    assert isinstance(err, ConfSyntaxError)


def test_malformed_composite_key_is_an_error() -> None:
    _, err = loads("[@k@xy]: 1 2")
    assert isinstance(err, ConfSyntaxError)
    assert "malformed composite key" in str(err)
    _, err = loads("[@]: 1 2")
    assert isinstance(err, ConfSyntaxError)


def test_unclosed_composite_key_is_an_error() -> None:
    # `]` after the first `:` belongs to the value, so the key never closes
    _, err = loads("[@k@:]: a:b:c")
    assert isinstance(err, ConfSyntaxError)
    assert "unclosed composite key" in str(err)


def test_sections(parse) -> None:
    conf = parse("g: 1\n[S1]\na: 2\n[ S2 ]\na: 3\n")
    assert conf.section_names() == ["S1", "S2"]
    assert conf.get_int("g") == (1, None)
    assert not conf.has_item("a")
    conf.section("S2")
    assert conf.get_int("a") == (3, None)


def test_duplicate_section_is_an_error() -> None:
    _, err = loads("[S]\na: 1\n[T]\nb: 2\n[S]\nc: 3\n")
    assert isinstance(err, ConfSyntaxError)
    assert "duplicate section [S]" in str(err)
    assert err.lineno == 5


def test_duplicate_empty_section_is_an_error() -> None:
    _, err = loads("[S]\n[S]\n")
    assert isinstance(err, ConfSyntaxError)


def test_empty_section_name_is_an_error() -> None:
    _, err = loads("[  ]\n")
    assert isinstance(err, ConfSyntaxError)


def test_composite_key_line_is_not_a_header(parse) -> None:
    conf = parse("[@k]: [x]\n")
    assert conf.section_names() == []
    assert conf.get_string_array("k") == (["[x]"], None)


def test_composite_keys_inside_sections(parse) -> None:
    conf = parse("[@arr]: 1 2\n[S]\n[@arr@,]: 3,4\n")
    assert conf.get_int_array("arr") == ([1, 2], None)
    conf.section("S")
    assert conf.get_int_array("arr") == ([3, 4], None)


def test_empty_text_has_global_section_only(parse) -> None:
    conf = parse("")
    assert conf.items() == []
    assert conf.section_names() == []
    assert conf.current is conf.header


def test_duplicate_key_warns_and_latter_wins() -> None:
    with pytest.warns(UserWarning, match="first occurrence at line 1"):
        conf, err = loads("a: 1\nb: 2\na: 3\n")
    assert err is None
    assert conf.get_int("a") == (3, None)
    assert conf.header.first_seen("a") == 1


def test_element_sep_option(parse) -> None:
    conf = parse("[@k]: 1,2,3", element_sep=",")
    assert conf.get_int_array("k") == ([1, 2, 3], None)
    conf = parse("[@k]: 1,2,3")
    assert conf.get_string_array("k") == (["1,2,3"], None)


def test_element_sep_must_be_one_char() -> None:
    with pytest.raises(ValueError):
        Conf(element_sep=", ")


def test_line_machine_states() -> None:
    machine = _LineMachine(StringIO("a: 1\n"), Conf())
    assert machine.state is ParseState.START
    assert machine.run() is None
    assert machine.state is ParseState.DONE

    machine = _LineMachine(StringIO("broken\n"), Conf())
    assert isinstance(machine.run(), ConfSyntaxError)
    assert machine.state is ParseState.ERROR


def test_readstream_fills_given_instance() -> None:
    ins = Conf(element_sep=";")
    conf, err = ConfParser.readstream(StringIO("[@k]: x;y"), ins)
    assert err is None
    assert conf is ins
    assert conf.get_string_array("k") == (["x", "y"], None)


def test_read_file(sample_path) -> None:
    conf, err = ConfParser(sample_path).read()
    assert err is None
    assert conf.get_string("StringItem") == ("value", None)
    assert conf.get_int("IntItem") == (1000, None)
    assert conf.get_float("FloatItem") == (90.5, None)
    assert conf.get_int_array("IntArray") == ([10, 12, 13], None)
    assert conf.get_float_array("FloatArray") == ([1.1, 1.2, 12.33], None)
    assert conf.get_string_array("Names") == (["alice", "bob", "carol"], None)
    assert conf.section_names() == ["Section1", "section2"]


def test_read_missing_file(tmp_path) -> None:
    conf, err = ConfParser(tmp_path / "nope.conf").read()
    assert conf is None
    assert isinstance(err, ConfIOError)


def test_read_file_with_element_sep(tmp_path) -> None:
    path = tmp_path / "a.conf"
    path.write_text("[@k]: 1|2\n", encoding="utf-8")
    conf, err = ConfParser(path, element_sep="|").read()
    assert err is None
    assert conf.get_int_array("k") == ([1, 2], None)


def test_read_non_utf8_file(tmp_path) -> None:
    path = tmp_path / "gbk.conf"
    text = "greeting: 你好，欢迎使用配置文件解析器，这是一段足够长的中文文本。\n" * 4
    path.write_bytes(text.encode("gbk"))
    conf, err = ConfParser(path).read()
    assert err is None
    assert conf.get_string("greeting").value.startswith("你好")
