"""
Tests for the WordKit Facade
============================
Tests for the WordKit convenience interface in wordkit/__init__.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkit import (
    WordKit,
    ConfigurationError,
    EndingPickMode,
    __version__,
)
from wordkit.generators import (
    BeginningCapitalsSpellingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    FileSamplingStrategy,
    NoneSpellingStrategy,
    WordListSamplingStrategy,
)


@pytest.fixture
def kit():
    return WordKit()


class TestWordKit:
    """Tests for the facade."""

    def test_version(self):
        assert __version__

    def test_generate_from_list(self, kit):
        words = kit.generate(5, samples=["Bob", "Bobby", "Steve", "Alice"], seed="Test")
        assert len(words) == 5
        assert len(set(words)) == 5

    def test_generate_is_seeded(self, kit):
        samples = "Tarrin, Tarkin, Terris, Tederin"
        assert kit.generate(5, samples=samples, seed="Test") == kit.generate(5, samples=samples, seed="Test")

    def test_build_generator_defaults(self, kit):
        generator = kit.build_generator(samples="Bob, Bobby")
        assert isinstance(generator.sampling_strategy, WordListSamplingStrategy)
        assert generator.sampling_strategy.get_samples() == ["Bob", "Bobby"]
        assert isinstance(generator.sequencing_strategy, CharDepthSequencingStrategy)
        assert generator.sequencing_strategy.depth == 1
        assert isinstance(generator.spelling_strategy, NoneSpellingStrategy)
        assert generator.parameters.ending_pick_mode is EndingPickMode.RANDOM
        assert generator.max_attempts == 1000

    def test_build_generator_options(self, kit):
        generator = kit.build_generator(
            samples="ka-ri; to-mo", separator=";", delimiter="-",
            capitalize=True, max_attempts=20,
            target_length_min=2, target_length_max=4, ending_pick_mode="follow_branch",
        )
        assert generator.sampling_strategy.get_samples() == ["ka-ri", "to-mo"]
        assert isinstance(generator.sequencing_strategy, DelimiterSequencingStrategy)
        assert isinstance(generator.spelling_strategy, BeginningCapitalsSpellingStrategy)
        assert generator.max_attempts == 20
        assert generator.parameters.ending_pick_mode is EndingPickMode.FOLLOW_BRANCH

    def test_build_generator_from_file(self, kit, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("Tarrin\nTarkin\n", encoding="utf-8")
        generator = kit.build_generator(file=path, depth=2)
        assert isinstance(generator.sampling_strategy, FileSamplingStrategy)
        assert generator.sampling_strategy.get_samples() == ["Tarrin", "Tarkin"]
        assert generator.sequencing_strategy.depth == 2

    def test_samples_and_file_conflict(self, kit, tmp_path):
        with pytest.raises(ConfigurationError):
            kit.build_generator(samples="Bob", file=tmp_path / "names.txt")

    def test_unknown_parameter(self, kit):
        with pytest.raises(ConfigurationError):
            kit.build_generator(samples="Bob", length=5)

    def test_generator_from_profile(self, kit, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text(
            "sampling:\n"
            "  definition_id: WordListSamplingStrategy\n"
            "  settings:\n"
            "    sample_set: ka-ri-na, to-mo-ri, sa-ku-ra\n"
            "sequencing:\n"
            "  definition_id: DelimiterSequencingStrategy\n"
            "  settings:\n"
            "    delimiter: '-'\n"
            "parameters:\n"
            "  seed: kana\n"
            "  target_length_min: 4\n"
            "  target_length_max: 6\n"
            "max_attempts: 100\n",
            encoding="utf-8",
        )
        generator = kit.generator_from_profile(profile)
        assert isinstance(generator.sequencing_strategy, DelimiterSequencingStrategy)
        assert generator.max_attempts == 100
        assert len(generator.generate(3)) == 3

    def test_profile_with_sample_list(self, kit, tmp_path):
        """A YAML list of samples works like separator-delimited text."""
        profile = tmp_path / "profile.yaml"
        profile.write_text(
            "sampling:\n"
            "  definition_id: WordListSamplingStrategy\n"
            "  settings:\n"
            "    sample_set: [Bob, Bobby, Steve, Alice]\n"
            "parameters:\n"
            "  seed: Test\n",
            encoding="utf-8",
        )
        generator = kit.generator_from_profile(profile)
        assert generator.sampling_strategy.get_samples() == ["Bob", "Bobby", "Steve", "Alice"]
        assert len(generator.generate(1)) == 1

    def test_profile_with_invalid_samples(self, kit, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text(
            "sampling:\n"
            "  definition_id: WordListSamplingStrategy\n"
            "  settings:\n"
            "    sample_set: {Bob: 1}\n",
            encoding="utf-8",
        )
        with pytest.raises(ConfigurationError):
            kit.generator_from_profile(profile)

    def test_profile_with_unknown_strategy(self, kit, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text("spelling: MissingSpellingStrategy\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            kit.generator_from_profile(profile)
