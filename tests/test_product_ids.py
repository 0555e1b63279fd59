from iap_catalog.catalog.product_ids import (
    dedupe_identifiers,
    load_product_identifiers,
    resolve_product_ids_path,
)


def test_load_plist_list_of_strings(write_product_ids):
    path = write_product_ids(["com.app.coins100", "com.app.noads"])

    assert load_product_identifiers(path) == ["com.app.coins100", "com.app.noads"]


def test_load_json_and_yaml_resources(write_product_ids):
    json_path = write_product_ids(["a", "b"], suffix=".json")
    yaml_path = write_product_ids("- a\n- c\n", suffix=".yml")

    assert load_product_identifiers(json_path) == ["a", "b"]
    assert load_product_identifiers(yaml_path) == ["a", "c"]


def test_missing_resource_returns_none(tmp_path):
    assert load_product_identifiers(tmp_path / "IAP_ProductIDs.plist") is None
    assert load_product_identifiers(None) is None


def test_unreadable_resource_returns_none(tmp_path):
    path = tmp_path / "IAP_ProductIDs.plist"
    path.write_bytes(b"<plist><array><string>broken")

    assert load_product_identifiers(path) is None


def test_malformed_json_returns_none(tmp_path):
    path = tmp_path / "IAP_ProductIDs.json"
    path.write_text('["com.app.coins100",', encoding="utf-8")

    assert load_product_identifiers(path) is None


def test_non_list_content_parses_to_empty_list(write_product_ids):
    path = write_product_ids({"coins": "com.app.coins100"})

    assert load_product_identifiers(path) == []


def test_list_with_non_strings_parses_to_empty_list(write_product_ids):
    path = write_product_ids(["com.app.coins100", 42], suffix=".json")

    assert load_product_identifiers(path) == []


def test_empty_list_is_returned_as_empty(write_product_ids):
    path = write_product_ids([])

    assert load_product_identifiers(path) == []


def test_resolve_prefers_plist_then_json(tmp_path, write_product_ids):
    write_product_ids(["x"], suffix=".json")
    assert resolve_product_ids_path(tmp_path).suffix == ".json"

    write_product_ids(["x"])
    assert resolve_product_ids_path(tmp_path).suffix == ".plist"


def test_resolve_returns_none_when_absent(tmp_path):
    assert resolve_product_ids_path(tmp_path) is None


def test_dedupe_collapses_duplicates():
    ids = ["com.app.coins100", "com.app.coins100", "com.app.noads"]

    assert dedupe_identifiers(ids) == frozenset({"com.app.coins100", "com.app.noads"})
