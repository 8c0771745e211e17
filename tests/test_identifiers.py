from herbal_garden.domain.identifiers import ProductKey, KeyKind


def test_numeric_string_is_catalog_id():
    assert ProductKey.candidates("7") == [ProductKey(KeyKind.CATALOG, 7)]


def test_int_is_catalog_id():
    assert ProductKey.candidates(7) == [ProductKey(KeyKind.CATALOG, 7)]


def test_hex_string_is_storage_id():
    raw = "0f" * 16
    assert ProductKey.candidates(raw) == [ProductKey(KeyKind.STORAGE, raw)]


def test_storage_id_is_tried_before_catalog_id():
    raw = "1" * 32
    keys = ProductKey.candidates(raw)
    assert [k.kind for k in keys] == [KeyKind.STORAGE, KeyKind.CATALOG]


def test_garbage_has_no_candidates():
    assert ProductKey.candidates("tulsi") == []
    assert ProductKey.candidates(None) == []
    assert ProductKey.candidates(True) == []
