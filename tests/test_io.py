import json
import logging
import os

import numpy as np
import pytest

from bladealign.model.fitting import points_to_plane
from bladealign.model.io import load_blade_json
from bladealign.model.profiles import Cloud, Profile

SAMPLE_BLADE = os.path.join(os.path.dirname(__file__), os.pardir, "assets", "blade_sample.json")


def _station(z: float) -> dict:
    return {
        "cx": [[-1.0, 0.5, z], [0.0, 1.0, z], [1.0, 0.5, z]],
        "cv": [[-1.0, 0.0, z], [0.0, 0.3, z], [1.0, 0.0, z]],
        "le": [[-1.1, 0.2, z], [-1.05, 0.4, z]],
        "re": [[1.1, 0.2, z], [1.05, 0.4, z]],
    }


def _write(tmp_path, data) -> str:
    path = tmp_path / "blade.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadBladeJson:

    def test_loads_profiles_in_order(self, tmp_path):
        airfoil = load_blade_json(_write(tmp_path, [_station(120.0), _station(180.0)]))

        assert isinstance(airfoil, tuple)
        assert len(airfoil) == 2
        assert all(isinstance(profile, Profile) for profile in airfoil)
        assert airfoil[0].cx.shape == (3, 3)
        assert airfoil[0].le.shape == (2, 3)
        assert airfoil[1].cv[0, 2] == 180.0

    def test_profiles_are_read_only(self, tmp_path):
        airfoil = load_blade_json(_write(tmp_path, [_station(0.0)]))
        with pytest.raises(ValueError):
            airfoil[0].cx[0, 0] = 5.0

    def test_empty_blade(self, tmp_path):
        assert load_blade_json(_write(tmp_path, [])) == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_blade_json(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "blade.json"
        path.write_text("[{\"cx\": [", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON parse error"):
            load_blade_json(str(path))

    def test_top_level_must_be_array(self, tmp_path):
        with pytest.raises(ValueError, match="must be an array"):
            load_blade_json(_write(tmp_path, _station(0.0)))

    def test_missing_cloud(self, tmp_path):
        station = _station(0.0)
        del station["le"]
        with pytest.raises(ValueError, match="missing point clouds: le"):
            load_blade_json(_write(tmp_path, [_station(1.0), station]))

    def test_malformed_triple(self, tmp_path):
        station = _station(0.0)
        station["re"] = [[1.0, 2.0], [3.0, 4.0]]
        with pytest.raises(ValueError, match="Profile 0"):
            load_blade_json(_write(tmp_path, [station]))

    def test_profile_must_be_object(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="bladealign"):
            with pytest.raises(ValueError, match="must be a JSON object"):
                load_blade_json(_write(tmp_path, [_station(0.0), [1.0, 2.0, 3.0]]))
        assert "Profile 1 must be a JSON object, got list." in caplog.text

    def test_sample_blade(self):
        airfoil = load_blade_json(SAMPLE_BLADE)
        assert len(airfoil) == 2

        plane = points_to_plane(*airfoil[0].xyz(Cloud.CX))
        assert np.allclose(plane.normal, [0.0, 0.0, 1.0], atol=1e-9)
        assert plane.dd == pytest.approx(120.0)


class TestProfile:

    def test_xyz_columns(self):
        profile = Profile.from_dict(_station(7.0))
        x, y, z = profile.xyz("cv")
        assert np.array_equal(x, [-1.0, 0.0, 1.0])
        assert np.array_equal(y, [0.0, 0.3, 0.0])
        assert np.array_equal(z, [7.0, 7.0, 7.0])

    def test_unknown_cloud(self):
        profile = Profile.from_dict(_station(0.0))
        with pytest.raises(ValueError):
            profile.cloud("tip")

    def test_to_dict(self):
        station = _station(2.0)
        assert Profile.from_dict(station).to_dict() == station
