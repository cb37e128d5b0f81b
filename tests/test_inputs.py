import pytest

from clone_fingerprint.core.models import PageTarget
from clone_fingerprint.inputs import (
    INVALID_FORMAT_MESSAGE,
    INVALID_TYPES_MESSAGE,
    InputError,
    load_targets_file,
    parse_targets_payload,
    parse_targets_tsv,
)


def test_parse_tsv_keeps_order_and_strips_brand():
    text = "https://legit.test\tAcme \r\n\nhttps://clone.test\tAcme\n"

    targets = parse_targets_tsv(text)

    assert targets == [
        PageTarget(url="https://legit.test", brand_name="Acme"),
        PageTarget(url="https://clone.test", brand_name="Acme"),
    ]


def test_parse_tsv_ignores_extra_columns():
    targets = parse_targets_tsv("https://legit.test\tAcme\tnotes\nhttps://clone.test\tAcme\t\t\n")

    assert [target.brand_name for target in targets] == ["Acme", "Acme"]


def test_parse_tsv_rejects_line_without_tab():
    with pytest.raises(InputError, match="Line 2"):
        parse_targets_tsv("https://legit.test\tAcme\nhttps://clone.test Acme\n")


def test_parse_tsv_rejects_invalid_url():
    with pytest.raises(InputError, match="Invalid URL: not a url"):
        parse_targets_tsv("not a url\tAcme\n")


def test_parse_tsv_requires_records():
    with pytest.raises(InputError):
        parse_targets_tsv("\n\n")


def test_load_targets_file_reads_utf8(tmp_path):
    path = tmp_path / "ListURLs.txt"
    path.write_text("https://legit.test\tBrändCo\n", encoding="utf-8")

    assert load_targets_file(path) == [PageTarget(url="https://legit.test", brand_name="BrändCo")]


def test_load_targets_file_missing(tmp_path):
    with pytest.raises(InputError, match="Unable to read"):
        load_targets_file(tmp_path / "missing.txt")


def test_parse_payload_accepts_pairs():
    payload = {"urls": [["https://legit.test", "Acme"], ["https://clone.test/login", "Acme"]]}

    targets = parse_targets_payload(payload)

    assert [target.url for target in targets] == ["https://legit.test", "https://clone.test/login"]


@pytest.mark.parametrize("payload", [None, [], "urls", {"urls": "https://legit.test"}, {"links": []}])
def test_parse_payload_rejects_bad_shape(payload):
    with pytest.raises(InputError) as excinfo:
        parse_targets_payload(payload)
    assert str(excinfo.value) == INVALID_FORMAT_MESSAGE


def test_parse_payload_rejects_non_string_fields():
    with pytest.raises(InputError) as excinfo:
        parse_targets_payload({"urls": [["https://legit.test", 42]]})
    assert str(excinfo.value) == INVALID_TYPES_MESSAGE


def test_parse_payload_rejects_invalid_url():
    with pytest.raises(InputError, match="Invalid URL: legit.test"):
        parse_targets_payload({"urls": [["legit.test", "Acme"]]})


def test_parse_payload_rejects_malformed_entry_and_empty_list():
    with pytest.raises(InputError):
        parse_targets_payload({"urls": [["https://legit.test"]]})
    with pytest.raises(InputError):
        parse_targets_payload({"urls": []})
