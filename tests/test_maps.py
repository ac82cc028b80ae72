from codedemos.maps import fill_maps, main


def test_sizes_match_count():
    hash_map, ordered = fill_maps(50)
    assert len(hash_map) == 50
    assert len(ordered) == 50


def test_every_key_counted_once():
    hash_map, ordered = fill_maps(20)
    assert set(hash_map.values()) == {1}
    assert set(ordered.values()) == {1}
    assert dict(ordered) == hash_map


def test_ordered_map_keys_are_sorted():
    _, ordered = fill_maps(30)
    keys = list(ordered.keys())
    assert keys == sorted(keys)
    assert keys[0] == 0
    assert keys[-1] == 29


def test_empty():
    hash_map, ordered = fill_maps(0)
    assert len(hash_map) == 0
    assert len(ordered) == 0


def test_main_prints_sizes(capsys):
    assert main(["--count", "7"]) == 0
    assert capsys.readouterr().out.splitlines() == ["7", "7"]