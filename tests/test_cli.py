import pytest

from wiki_scraper.cli import create_argument_parser, main


def test_extract_to_stdout(wiki_dir, capsys):
    root = wiki_dir({"AA/wiki_00": ["The cat sat on the mat. There are 2 cats here. The river is wide."]})

    status = main(["extract", "-d", str(root), "-l", "english"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "The cat sat on the mat.\nThe river is wide.\n"
    assert "[extract]" in captured.err


def test_extract_no_check(wiki_dir, capsys):
    root = wiki_dir({"AA/wiki_00": ["The cat sat on the mat. There are 2 cats here."]})

    main(["extract", "-d", str(root), "-l", "english", "--no_check"])

    assert capsys.readouterr().out.splitlines() == ["The cat sat on the mat.", "There are 2 cats here."]


def test_extract_max_sentences(wiki_dir, capsys):
    root = wiki_dir({"AA/wiki_00": ["One is here. Two is here. Three is here."]})

    main(["extract", "-d", str(root), "-l", "english", "--max_sentences", "1"])

    assert capsys.readouterr().out == "One is here.\n"


def test_extract_file(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_text("One is here. Two is here.\nThree is here.\n", encoding="utf-8")

    status = main(["extract-file", "-f", str(path), "-l", "english", "--max_sentences", "1"])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["One is here.", "Three is here."]


def test_invalid_rules_exit_before_output(wiki_dir, write_rules, capsys):
    root = wiki_dir({"AA/wiki_00": ["The cat sat on the mat."]})
    rules_dir = write_rules("xx", "abbreviation_patterns = ['(unclosed']\n")

    status = main(["extract", "-d", str(root), "-l", "xx", "--rules_dir", str(rules_dir)])

    captured = capsys.readouterr()
    assert status == 2
    assert captured.out == ""
    assert "Invalid rules" in captured.err


def test_missing_input(tmp_path, capsys):
    status = main(["extract", "-d", str(tmp_path / "nope"), "-l", "english"])

    assert status == 1
    assert "not found" in capsys.readouterr().err


def test_extract_then_report(wiki_dir, tmp_path, capsys):
    root = wiki_dir({"AA/wiki_00": ["There are 2 cats here. The cat sat on the mat."]})
    log_dir = tmp_path / "logs"

    main(["extract", "-d", str(root), "-l", "english", "--log_dir", str(log_dir)])
    capsys.readouterr()
    status = main(["report", "--log_dir", str(log_dir)])

    out = capsys.readouterr().out
    assert status == 0
    assert "numbers: 1" in out
    assert "There are 2 cats here." in out


def test_blacklist_to_stdout(tmp_path, capsys):
    harvest = tmp_path / "harvest.txt"
    harvest.write_text("The cat sat.\nThe dog sat.\n", encoding="utf-8")

    status = main(["blacklist", "-i", str(harvest)])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["cat", "dog"]


def test_language_is_required():
    with pytest.raises(SystemExit):
        create_argument_parser().parse_args(["extract", "-d", "text"])


def test_interrupt_exits_130(wiki_dir, monkeypatch, capsys):
    root = wiki_dir({"AA/wiki_00": ["The cat sat on the mat."]})

    def interrupted(args):
        raise KeyboardInterrupt

    monkeypatch.setattr("wiki_scraper.cli.run_stage_extract", interrupted)

    status = main(["extract", "-d", str(root), "-l", "english"])

    assert status == 130
    assert "Interrupted" in capsys.readouterr().err
