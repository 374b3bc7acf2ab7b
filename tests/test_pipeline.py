"""Tests for structure provisioning and the docking pipeline."""

import json
import logging
import os

import pytest

from dockscope.core.domain.implementations import (
    DirectoryStructureSource,
    SynthesizedStructureSource,
)
from dockscope.core.domain.interfaces.structure_source import StructureSource
from dockscope.core.domain.models.reference import ReferenceScheme
from dockscope.core.services.affinity_service import AffinityService
from dockscope.core.services.geometry_service import GeometryService
from dockscope.core.services.pipeline_service import DockingPipeline
from dockscope.core.services.structure_service import StructureService
from dockscope.exceptions import ConfigurationError, StructureSourceError
from dockscope.io.pdb_writer import PDBWriter

ETHANOL_PDB = SynthesizedStructureSource().fetch("CCO")


class BrokenSource(StructureSource):
    name = "broken"

    def fetch(self, formula):
        raise StructureSourceError("service unavailable")


class FixedSource(StructureSource):
    name = "fixed"

    def __init__(self, text):
        self.text = text

    def fetch(self, formula):
        return self.text


class TestStructureService:
    def test_synthesis_is_the_fallback(self):
        record = StructureService().provide_ligand("CCO")

        assert record.synthesized
        assert record.source == "synthesized"
        assert record.text == ETHANOL_PDB
        assert PDBWriter().write(record.graph) == record.text

    def test_first_source_with_text_wins(self):
        service = StructureService([FixedSource(None), FixedSource("ATOM  stored")])
        record = service.provide_ligand("CCO")

        assert record.text == "ATOM  stored"
        assert record.source == "fixed"
        assert not record.synthesized
        assert record.graph is None

    def test_failing_source_is_logged_and_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            record = StructureService([BrokenSource()]).provide_ligand("CCO")

        assert record.synthesized
        assert "service unavailable" in caplog.text


class TestDirectoryStructureSource:
    def test_reads_stored_structure(self, tmp_path):
        source = DirectoryStructureSource(str(tmp_path))
        with open(source.path_for("CCO"), "w") as f:
            f.write(ETHANOL_PDB)

        assert source.fetch("CCO") == ETHANOL_PDB
        assert source.fetch("CCN") is None

    def test_ignores_files_without_atoms(self, tmp_path):
        source = DirectoryStructureSource(str(tmp_path))
        with open(source.path_for("CCO"), "w") as f:
            f.write("HEADER    empty\nEND\n")

        assert source.fetch("CCO") is None

    def test_unreadable_file_raises(self, tmp_path):
        source = DirectoryStructureSource(str(tmp_path))
        os.mkdir(source.path_for("CCO"))

        with pytest.raises(StructureSourceError):
            source.fetch("CCO")


class TestDockingPipeline:
    def test_requires_formula_or_structure(self):
        with pytest.raises(ConfigurationError):
            DockingPipeline().run()

    def test_ethanol_against_il6(self):
        report = DockingPipeline().run("CCO", "il-6")

        assert report.structure_source == "synthesized"
        assert report.ligand_pdb == ETHANOL_PDB
        assert report.ligand_pdbqt.endswith("TORSDOF 0\nEND\n")
        assert "TORSDOF 0" in report.receptor_pdbqt
        assert report.receptor_pdb.startswith("ATOM")
        assert report.descriptors.molecular_weight == 40.02
        assert report.affinity == AffinityService().predict("CCO", "il-6")
        assert report.reference is not None
        assert 1.0 <= report.reference.affinity_score <= 10.0
        assert len(report.contacts) <= 10
        assert all(c.distance <= 5.0 for c in report.contacts)
        assert set(report.timings) >= {"ligand_structure", "affinity", "contacts"}

    def test_synthesizes_ligand_once(self, monkeypatch):
        calls = []
        original = GeometryService.synthesize

        def counting(self, formula):
            calls.append(formula)
            return original(self, formula)

        monkeypatch.setattr(GeometryService, "synthesize", counting)
        report = DockingPipeline().run("CCO", "il-6")

        assert calls == ["CCO"]
        assert report.ligand_pdb == ETHANOL_PDB

    def test_report_is_json_serialisable(self):
        report = DockingPipeline(scheme=ReferenceScheme.EXPONENTIAL).run("CCO", "il-10")
        data = json.loads(json.dumps(report.to_dict()))

        assert data["receptor"] == "il-10"
        assert data["reference"]["scheme"] == "Exponential rank"
        assert "ligand_pdb" not in data
        assert "ligand_pdb" in report.to_dict(include_structures=True)

    def test_provided_structure_text(self):
        report = DockingPipeline().run(structure_text=ETHANOL_PDB)

        assert report.structure_source == "provided"
        assert report.ligand_pdb == ETHANOL_PDB
        assert report.reference is None
        assert report.ligand_pdbqt.count("CONECT") == 2

    def test_directory_source(self, tmp_path):
        source = DirectoryStructureSource(str(tmp_path))
        with open(source.path_for("CCO"), "w") as f:
            f.write(ETHANOL_PDB)

        report = DockingPipeline(sources=[source]).run("CCO")
        assert report.structure_source == "directory"

    def test_stats_accumulate_across_runs(self):
        pipeline = DockingPipeline()
        pipeline.run("CCO")
        pipeline.run("CCN")

        assert pipeline.stats.get_stats("affinity").count == 2
        assert "affinity" in pipeline.stats.report()
