from wms_bridge.core.files import RawBytes, UploadedFile


def test_uploaded_file_reads_from_disk(tmp_path):
    path = tmp_path / "phpA1B2.tmp"
    path.write_bytes(b"sku;qty\n")

    upload = UploadedFile(path=path, client_name="orders.csv")

    assert upload.read() == b"sku;qty\n"
    assert upload.name == "orders.csv"


def test_raw_bytes_from_text():
    raw = RawBytes.from_text("sku;qty", name="orders.csv")

    assert raw.read() == b"sku;qty"
    assert raw.name == "orders.csv"


def test_raw_bytes_name_is_optional():
    assert RawBytes(b"data").name is None
