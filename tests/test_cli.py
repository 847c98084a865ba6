from fieldstore.cli import DEMO_FIELDS, main
from fieldstore.file_manager import FileManager
from fieldstore.memory_manager import MemoryManager


def test_demo_runs_and_prints_first_field(tmp_path, capsys):
    path = tmp_path / "batz"
    path.write_bytes(b"")
    assert main([str(path)]) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == ["aaaa2: aaaa"]
    assert "warning" in err


def test_demo_leaves_expected_contents(tmp_path, capsys):
    path = tmp_path / "batz"
    path.write_bytes(b"")
    main([str(path)])
    with FileManager(path) as fm:
        store = MemoryManager(fm, DEMO_FIELDS)
        assert store.validate_all_fields() == []
        assert store.read_field(0) == b"####"
        assert store.read_field(1) == b"bbbbbb"
        assert store.read_field(3) == b"d" * 20


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    _, err = capsys.readouterr()
    assert err.startswith("error:")