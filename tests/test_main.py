from ot_protocols.main import main


def test_rsa(capsys):
    assert main(["rsa", "hello", "world", "1"]) == 0
    assert capsys.readouterr().out.strip() == "Received: world"


def test_ec(capsys):
    assert main(["ec", "hello", "world", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Received: hello"


def test_extension(capsys):
    assert main(["extension", "010", "0A", "0B", "1A", "1B", "2A", "2B"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["Received: 0A", "Received: 1B", "Received: 2A"]


def test_extension_count_mismatch(capsys):
    assert main(["extension", "01", "0A", "0B"]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out
    assert main(["ec", "only-one"]) == 1
    assert main(["rsa", "a", "b", "2"]) == 1
    assert main(["extension", "0x", "a", "b"]) == 1


def test_verbose(capsys):
    assert main(["--verbose", "ec", "a", "b", "1"]) == 0
    assert "Received: b" in capsys.readouterr().out
