import orjson
import pytest


@pytest.fixture
def write_rules(tmp_path):
    """Write a <language>.toml rule document into a temporary rules dir."""
    rules_dir = tmp_path / "rules"
    rules_dir.mkdir()

    def _write(language, content):
        path = rules_dir / f"{language}.toml"
        path.write_text(content, encoding="utf-8")
        return rules_dir

    return _write


@pytest.fixture
def wiki_dir(tmp_path):
    """Write WikiExtractor-style JSON files: {subdir: [article texts]}."""
    root = tmp_path / "text"

    def _write(files):
        for rel, texts in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                for i, text in enumerate(texts):
                    f.write(orjson.dumps({"id": str(i), "title": f"{rel} {i}", "text": text}))
                    f.write(b"\n")
        return root

    return _write
