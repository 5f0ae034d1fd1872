"""
Tests for the command-line interface.
"""

import io
import json
import logging

import pytest
from docx import Document

from resumeats.app import guess_mime_type, main
from resumeats.normalize import DOCX_MIME, PDF_MIME, TEXT_MIME


@pytest.fixture(autouse=True)
def clean_environment(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory with no RESUMEATS_* settings."""
    monkeypatch.chdir(tmp_path)
    for var in ("RESUMEATS_LOG_LEVEL", "RESUMEATS_LOG_DIR", "RESUMEATS_WEIGHTS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def resume_file(tmp_path, sample_resume_text):
    path = tmp_path / "resume.txt"
    path.write_text(sample_resume_text, encoding="utf-8")
    return path


@pytest.fixture
def job_file(tmp_path, job_data):
    path = tmp_path / "job.json"
    path.write_text(json.dumps(job_data), encoding="utf-8")
    return path


class TestVersion:
    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == "0.1.0"


class TestLogging:
    def test_pypdf_warnings_quietened(self, resume_file, monkeypatch, capsys):
        """The CLI, not the library, raises the pypdf log level."""
        pypdf_logger = logging.getLogger("pypdf")
        monkeypatch.setattr(pypdf_logger, "level", logging.NOTSET)
        main(["parse", "--input", str(resume_file)])
        assert pypdf_logger.level == logging.ERROR


class TestParseCommand:
    def test_parse_text(self, resume_file, capsys):
        main(["parse", "--input", str(resume_file)])
        data = json.loads(capsys.readouterr().out)
        assert "Python" in data["skills"]
        assert data["contactInfo"]["github"] == "github.com/janedoe"

    def test_parse_docx(self, tmp_path, capsys):
        doc = Document()
        doc.add_paragraph("Skills")
        doc.add_paragraph("Python, SQL")
        path = tmp_path / "resume.docx"
        doc.save(str(path))

        main(["parse", "--input", str(path)])
        data = json.loads(capsys.readouterr().out)
        assert data["skills"][:2] == ["Python", "SQL"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit, match="Input file not found"):
            main(["parse", "--input", str(tmp_path / "nope.pdf")])

    def test_extraction_error_exits(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf")
        with pytest.raises(SystemExit, match="Failed to extract text"):
            main(["parse", "--input", str(path)])

    def test_unsupported_mime_type(self, resume_file):
        with pytest.raises(SystemExit, match="Unsupported document format"):
            main(["parse", "--input", str(resume_file), "--mime-type", "image/png"])


class TestAnalyzeCommand:
    def test_analyze(self, resume_file, job_file, capsys):
        main(["analyze", "--resume", str(resume_file), "--job", str(job_file)])
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"atsScore", "quality"}
        assert data["atsScore"]["skillsScore"] == 70
        assert data["atsScore"]["missingSkills"] == ["Terraform"]

    def test_keywords_derived_when_absent(self, tmp_path, resume_file, job_data, capsys):
        del job_data["keywords"]
        job_data["description"] = "Python services. Python APIs. Django services and Django admin."
        path = tmp_path / "job_no_keywords.json"
        path.write_text(json.dumps(job_data), encoding="utf-8")

        main(["analyze", "--resume", str(resume_file), "--job", str(path)])
        ats = json.loads(capsys.readouterr().out)["atsScore"]
        assert ats["matchedKeywords"] == ["django", "python", "services"]

    def test_configured_weights(self, resume_file, job_file, capsys, monkeypatch):
        monkeypatch.setenv(
            "RESUMEATS_WEIGHTS", "skills=1.0,experience=0.0,keywords=0.0,formatting=0.0"
        )
        main(["analyze", "--resume", str(resume_file), "--job", str(job_file)])
        ats = json.loads(capsys.readouterr().out)["atsScore"]
        assert ats["overallScore"] == ats["skillsScore"]

    def test_invalid_configuration(self, resume_file, job_file, monkeypatch):
        monkeypatch.setenv("RESUMEATS_WEIGHTS", "skills=2")
        with pytest.raises(SystemExit, match="Invalid configuration"):
            main(["analyze", "--resume", str(resume_file), "--job", str(job_file)])

    def test_invalid_job(self, tmp_path, resume_file, invalid_job_data):
        path = tmp_path / "bad_job.json"
        path.write_text(json.dumps(invalid_job_data), encoding="utf-8")
        with pytest.raises(SystemExit, match="Missing required field: description"):
            main(["analyze", "--resume", str(resume_file), "--job", str(path)])


class TestValidateCommand:
    def test_valid(self, job_file, capsys):
        main(["validate", "--input", str(job_file)])
        assert capsys.readouterr().out.strip() == "Valid"

    def test_invalid_exits_2(self, tmp_path, invalid_job_data, capsys):
        path = tmp_path / "bad_job.json"
        path.write_text(json.dumps(invalid_job_data), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["validate", "--input", str(path)])
        assert exc.value.code == 2
        out = capsys.readouterr().out
        assert out.startswith("Invalid:")
        assert " - Missing required field: description" in out

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit, match="Invalid JSON"):
            main(["validate", "--input", str(path)])


class TestKeywordsCommand:
    def test_keywords(self, tmp_path, capsys):
        path = tmp_path / "job.txt"
        path.write_text("kafka kafka kafka spark spark flink", encoding="utf-8")
        main(["keywords", "--input", str(path)])
        assert capsys.readouterr().out.split() == ["kafka", "spark"]

    def test_limit(self, tmp_path, capsys):
        path = tmp_path / "job.txt"
        path.write_text("kafka kafka kafka spark spark", encoding="utf-8")
        main(["keywords", "--input", str(path), "--limit", "1"])
        assert capsys.readouterr().out.split() == ["kafka"]


class TestGuessMimeType:
    def test_known_suffixes(self, tmp_path):
        assert guess_mime_type(tmp_path / "a.PDF") == PDF_MIME
        assert guess_mime_type(tmp_path / "a.docx") == DOCX_MIME
        assert guess_mime_type(tmp_path / "a.txt") == TEXT_MIME

    def test_unknown_suffix_defaults_to_text(self, tmp_path):
        assert guess_mime_type(tmp_path / "resume") == TEXT_MIME
