from probemap.hashing import default_hash, fnv1a_32


def test_fnv1a_32():
    assert fnv1a_32("") == 2166136261
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968


def test_fnv1a_32_str_and_bytes_agree():
    assert fnv1a_32("héllo") == fnv1a_32("héllo".encode("utf-8"))


def test_fnv1a_32_fits_in_32_bits():
    assert 0 <= fnv1a_32("x" * 1000) < 2**32


def test_default_hash():
    assert default_hash(42) == hash(42)
    assert default_hash("k") == hash("k")
