from beauty.attributes import Attributes


def test_empty_value():
    attributes = Attributes()
    assert attributes["empty"] == ""
    assert "empty" not in attributes


def test_insert_value():
    attributes = Attributes()
    attributes.insert("key", "value")
    assert attributes["key"] == "value"


def test_target_split_constructor():
    attributes = Attributes("key=value")
    assert attributes["key"] == "value"


def test_target_multiple_split_constructor():
    attributes = Attributes("key1=value1&key2=value2")
    assert attributes["key1"] == "value1"
    assert attributes["key2"] == "value2"
    assert len(attributes) == 2


def test_numeric_values():
    attributes = Attributes()
    attributes.insert("key1", "1")
    attributes.insert("key2", "123")
    attributes.insert("key3", "0")
    assert int(attributes["key1"]) == 1
    assert int(attributes["key2"]) == 123
    assert int(attributes["key3"]) == 0
    assert attributes.get("key4", 789) == 789

    attributes.insert("key11", "1.5")
    attributes.insert("key21", "123.8")
    attributes.insert("key31", "0.4")
    assert float(attributes["key11"]) == 1.5
    assert float(attributes["key21"]) == 123.8
    assert float(attributes["key31"]) == 0.4
    assert attributes["key11"] == "1.5"
    assert attributes["key21"] == "123.8"
    assert attributes["key31"] == "0.4"


def test_values_are_unescaped():
    attributes = Attributes("filename=%2ftmp%2fsrv%2fdata%2Epcapng")
    assert attributes["filename"] == "/tmp/srv/data.pcapng"


def test_first_insert_wins():
    attributes = Attributes("k=a&k=b")
    assert attributes["k"] == "a"


def test_malformed_pairs_are_skipped():
    attributes = Attributes("novalue&a=b=c&ok=1")
    assert dict(attributes) == {"ok": "1"}


def test_custom_separator():
    attributes = Attributes("a=1;b=2", sep=";")
    assert dict(attributes) == {"a": "1", "b": "2"}


def test_get_missing_returns_default_none():
    assert Attributes().get("missing") is None