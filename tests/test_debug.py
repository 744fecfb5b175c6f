from probemap.debug import dump_map, probe_distance
from probemap.hashmap import HashMap
from probemap.shared import printf, printf_err


def test_dump_map(capsys):
    m = HashMap([(1, "a"), (9, "b"), (4, "d")])
    m.erase(1)

    dump_map(m, "m")

    assert capsys.readouterr().out == (
        "== m (capacity 8, live 2, used 3) ==\n"
        "0000 EMPTY\n"
        "0001 TOMBSTONE\n"
        "0002 OCCUPIED  9 = 'b' (home 0001, +1)\n"
        "0003 EMPTY\n"
        "0004 OCCUPIED  4 = 'd'\n"
        "0005 EMPTY\n"
        "0006 EMPTY\n"
        "0007 EMPTY\n"
    )


def test_probe_distance_wraps():
    m = HashMap([(7, "a"), (15, "b")])
    table = m._table

    assert table.find(15) == 0
    assert probe_distance(table, 7, 0) == 1


def test_printf_helpers(capsys):
    printf("{0:04d} {1:s}\n", 7, "EMPTY")
    printf_err("[{0:s}]\n", "grow")

    captured = capsys.readouterr()
    assert captured.out == "0007 EMPTY\n"
    assert captured.err == "[grow]\n"
