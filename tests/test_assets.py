from pathlib import Path

from hatgame.assets import AssetCollection, all_collections, missing_assets


def _all_paths():
    return [p for c in all_collections() for p in c.assets.values()]


def test_collection_names_in_load_order():
    names = [c.name for c in all_collections()]
    assert names == ["fonts", "audio", "textures", "abilities", "debug_textures"]


def test_known_paths():
    collections = {c.name: c for c in all_collections()}
    assert collections["audio"]["theme"] == "audio/theme.ogg"
    assert collections["textures"]["imp_queen"] == "textures/enemies/imp_mother.png"
    assert collections["debug_textures"]["rect"] == "textures/debug/rect_128.png"


def test_collection_len_matches_assets():
    collection = AssetCollection("x", {"a": "a.png", "b": "b.png"})
    assert len(collection) == 2
    assert collection["b"] == "b.png"


def test_all_missing_in_empty_dir(tmp_path):
    assert missing_assets(tmp_path) == _all_paths()


def test_nothing_missing_when_all_present(tmp_path):
    for path in _all_paths():
        target = tmp_path / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    assert missing_assets(str(tmp_path)) == []


def test_one_missing(tmp_path):
    paths = _all_paths()
    for path in paths[1:]:
        target = Path(tmp_path) / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    assert missing_assets(tmp_path) == [paths[0]]


def test_paths_are_unique_within_collections():
    for collection in all_collections():
        values = list(collection.assets.values())
        assert len(values) == len(set(values))