"""Tests for batch processing and the command-line entry points."""

import json
import logging

import pandas as pd
import pytest

from dockscope.core.services.batch_service import (
    COLUMNS,
    BatchService,
    LigandEntry,
    parse_ligand_lines,
    validate_batch,
)
from dockscope.exceptions import ConfigurationError
from dockscope.io import parse_atom_records, parse_torsdof
from dockscope.presentation.cli import batch, predict


def test_parse_ligand_lines():
    ligands = parse_ligand_lines("CCO ethanol\n\n  c1ccccc1 benzene ring \nCCN\n")

    assert ligands == [
        LigandEntry("CCO", "ethanol"),
        LigandEntry("c1ccccc1", "benzene ring"),
        LigandEntry("CCN", None),
    ]
    assert ligands[2].label == "CCN"


class TestValidateBatch:
    def test_empty(self):
        with pytest.raises(ConfigurationError):
            validate_batch([])

    def test_too_many(self):
        with pytest.raises(ConfigurationError, match="Maximum 20"):
            validate_batch([LigandEntry("CCO")] * 21)

    def test_short_formula(self):
        with pytest.raises(ConfigurationError, match="CC"):
            validate_batch([LigandEntry("CCO"), LigandEntry("CC")])

    def test_valid(self):
        validate_batch([LigandEntry("CCO")] * 20)


class TestBatchService:
    def test_run_collects_rows(self):
        service = BatchService()
        df = service.run(
            parse_ligand_lines("CCO ethanol\nCC(=O)Oc1ccccc1C(=O)O aspirin"),
            receptor_key="tnf-alpha",
            show_progress=False,
        )

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == COLUMNS
        assert list(df["ligand_name"]) == ["ethanol", "aspirin"]
        assert df["pkd"].between(1.0, 10.0).all()
        assert service.failures == []
        assert service.stats.get_stats("affinity").count == 2

    def test_invalid_batch_is_rejected(self):
        with pytest.raises(ConfigurationError):
            BatchService().run([LigandEntry("C")], show_progress=False)

    def test_export_csv(self, tmp_path):
        service = BatchService()
        service.run([LigandEntry("CCO", "ethanol")], "il-6", show_progress=False)

        path = service.export_csv(str(tmp_path / "out" / "results.csv"))
        table = pd.read_csv(path)

        assert len(table) == 1
        assert table.loc[0, "formula"] == "CCO"
        assert table.loc[0, "binding_mode"] == "Moderate Binder"


class TestCommandLine:
    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_predict_prints_report(self, tmp_path, capsys):
        pdb_path = tmp_path / "ligand.pdb"
        pdbqt_path = tmp_path / "ligand.pdbqt"

        code = predict.main(
            [
                "CCO",
                "--receptor",
                "il-6",
                "--pdb-out",
                str(pdb_path),
                "--pdbqt-out",
                str(pdbqt_path),
            ]
        )

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["formula"] == "CCO"
        assert report["affinity"]["binding_mode"] == "Moderate Binder"
        assert len(parse_atom_records(pdb_path.read_text())) == 3
        assert parse_torsdof(pdbqt_path.read_text()) == 0

    def test_predict_with_sequence_file(self, tmp_path, capsys):
        fasta = tmp_path / "target.fasta"
        fasta.write_text(">target\nMKTAYIAKQR\nQISFVKSHFS\n")

        code = predict.main(["CCO", "--sequence-file", str(fasta), "--scheme", "harmonic"])

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["reference"]["scheme"] == "Harmonic rank"

    def test_predict_missing_sequence_file(self, tmp_path):
        code = predict.main(["CCO", "--sequence-file", str(tmp_path / "missing.fasta")])
        assert code == 1

    def test_batch_writes_csv(self, tmp_path, capsys):
        ligand_file = tmp_path / "ligands.txt"
        ligand_file.write_text("CCO ethanol\nCCN ethylamine\n")
        output = tmp_path / "results.csv"
        log_file = tmp_path / "batch.log"

        code = batch.main(
            [
                str(ligand_file),
                str(output),
                "--receptor",
                "il-17a",
                "--no-progress",
                "--verbose",
                "--log-file",
                str(log_file),
            ]
        )

        assert code == 0
        assert "Processed 2/2 ligands" in capsys.readouterr().out
        assert len(pd.read_csv(output)) == 2
        assert "Starting batch of 2 ligands" in log_file.read_text()

    def test_batch_rejects_invalid_input(self, tmp_path):
        ligand_file = tmp_path / "ligands.txt"
        ligand_file.write_text("C\n")

        assert batch.main([str(ligand_file), str(tmp_path / "out.csv")]) == 1
        assert not (tmp_path / "out.csv").exists()
