from wordhash.cli import main


def _words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("car\nbus\n", encoding="utf-8")
    return path


def test_main_finds_word(tmp_path, capsys):
    status = main([str(_words_file(tmp_path)), "car"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.endswith("\nfound\n")
    assert out.startswith("CONSIDER REDIRECTING THE OUTPUT TO A TXT FILE")


def test_main_reports_missing_word(tmp_path, capsys):
    status = main([str(_words_file(tmp_path)), "train"])
    assert status == 0
    assert capsys.readouterr().out.endswith("\nnot found\n")


def test_main_default_word_is_car(tmp_path, capsys):
    main([str(_words_file(tmp_path))])
    assert capsys.readouterr().out.endswith("\nfound\n")


def test_main_missing_file_fails(tmp_path, capsys):
    status = main([str(tmp_path / "absent.txt")])
    assert status == 1
    assert "wordhash:" in capsys.readouterr().err