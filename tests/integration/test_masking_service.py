"""Integration tests for MaskingService and file processing."""

import pytest

from core.element_masker import ElementMasker
from core.masking_service import MaskingService, MaskingServiceFactory
from core.protocols import NullLogger
from file_io.file_processor import process_file
from file_io.readers import MockTextReader, TextReader


SOAP_REQUEST = """<?xml version="1.0" encoding="UTF-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
  <soap:Body>
    <login>
      <username>alice</username>
      <password>hunter2</password>
      <secret><secret>nested</secret>outer</secret>
    </login>
  </soap:Body>
</soap:Envelope>
"""

SOAP_REQUEST_MASKED = """<?xml version="1.0" encoding="UTF-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
  <soap:Body>
    <login>
      <username>alice</username>
      <password>***</password>
      <secret>***</secret>
    </login>
  </soap:Body>
</soap:Envelope>
"""


class TestMaskingService:
    """Tests for MaskingService with injected dependencies."""

    def test_process_text(self, recording_logger):
        service = MaskingService(
            reader=MockTextReader(),
            masker=ElementMasker(["password", "secret"], logger=recording_logger),
            logger=recording_logger
        )

        result = service.process_text(SOAP_REQUEST)

        assert result.masked_text == SOAP_REQUEST_MASKED
        assert result.stats.elements_by_name == {"password": 1, "secret": 1}
        assert recording_logger.messages

    def test_process_file_with_mock_reader(self, temp_output_dir, recording_logger):
        reader = MockTextReader(SOAP_REQUEST)
        service = MaskingService(
            reader=reader,
            masker=ElementMasker(["password", "secret"], logger=recording_logger),
            logger=recording_logger
        )
        output_path = temp_output_dir / "request.masked.xml"
        log_path = temp_output_dir / "request_log.txt"

        result = service.process_file(
            input_path=temp_output_dir / "request.xml",
            output_path=output_path,
            log_path=log_path
        )

        assert result is not None
        assert reader.read_called_with == [str(temp_output_dir / "request.xml")]
        assert recording_logger.file_handlers == [log_path]
        assert output_path.read_text(encoding="utf-8") == SOAP_REQUEST_MASKED

    def test_process_file_to_stdout(self, temp_output_dir, capsys):
        service = MaskingService(
            reader=MockTextReader("<a><password>x</password></a>"),
            masker=ElementMasker(["password"]),
            logger=NullLogger()
        )

        service.process_file(input_path=temp_output_dir / "in.xml")

        assert capsys.readouterr().out == "<a><password>***</password></a>"

    def test_process_missing_file(self, temp_output_dir, capsys):
        service = MaskingService(
            reader=TextReader(),
            masker=ElementMasker(["password"]),
            logger=NullLogger()
        )

        result = service.process_file(input_path=temp_output_dir / "missing.xml")

        assert result is None
        assert "Error processing missing.xml" in capsys.readouterr().err

    def test_verbose_lists_elements(self, temp_output_dir, capsys):
        service = MaskingService(
            reader=MockTextReader("<a><password>x</password><password>y"),
            masker=ElementMasker(["password"]),
            logger=NullLogger()
        )

        result = service.process_file(
            input_path=temp_output_dir / "in.xml",
            output_path=temp_output_dir / "out.xml",
            verbose=True
        )

        err = capsys.readouterr().err
        assert result.truncated is True
        assert "1. <password> at 3-25" in err
        assert "(unterminated)" in err
        assert "Total: 2 elements masked" in err


class TestMaskingServiceFactory:
    """Tests for MaskingServiceFactory."""

    def test_names_from_config(self, sample_config):
        service = MaskingServiceFactory.create(config=sample_config)
        assert service.masker.element_names == ("password", "secret")

    def test_explicit_names_override_config(self, sample_config):
        service = MaskingServiceFactory.create(config=sample_config, element_names=["token"])
        assert service.masker.element_names == ("token",)

    def test_no_names_raises(self):
        with pytest.raises(ValueError, match="No element names"):
            MaskingServiceFactory.create(config={})

    def test_reader_uses_configured_extensions(self, sample_config):
        service = MaskingServiceFactory.create(config=sample_config)
        assert service.reader.extensions == [".xml", ".txt"]


class TestProcessFile:
    """Tests for file_io.process_file."""

    def test_end_to_end(self, temp_output_dir, sample_config):
        input_path = temp_output_dir / "request.xml"
        input_path.write_text(SOAP_REQUEST, encoding="utf-8")
        output_path = temp_output_dir / "request.masked.xml"
        log_path = temp_output_dir / "request_log.txt"

        result = process_file(input_path, output_path, log_path, config=sample_config)

        assert result is not None
        assert output_path.read_text(encoding="utf-8") == SOAP_REQUEST_MASKED
        assert log_path.exists()

    def test_no_element_names(self, temp_output_dir, capsys):
        input_path = temp_output_dir / "request.xml"
        input_path.write_text(SOAP_REQUEST, encoding="utf-8")

        result = process_file(input_path, None, None, config={})

        assert result is None
        assert "No element names" in capsys.readouterr().err

    def test_unsupported_extension(self, temp_output_dir, sample_config, capsys):
        input_path = temp_output_dir / "request.soap"
        input_path.write_text(SOAP_REQUEST, encoding="utf-8")

        result = process_file(input_path, None, None, config=sample_config)

        assert result is None
        assert "Unsupported file format" in capsys.readouterr().err
