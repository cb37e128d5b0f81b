from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_package_readme_is_the_project_readme():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")

    assert 'readme = "README.md"' in pyproject
    assert (ROOT / "README.md").read_text(encoding="utf-8").startswith("# clone-fingerprint")
