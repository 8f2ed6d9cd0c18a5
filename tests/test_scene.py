"""Tests for scene description, upload and the reference scene.

Tests cover:
- Validation of scene dataclasses
- Dictionary round trips and unknown type tags
- JSON scene files with and without a view
- SceneManager field upload
- Reference scene contents and parameter overrides
"""

import json

import pytest


def _sample_config():
    from src.glint.scene.description import (
        DirectionalLightInfo,
        MaterialInfo,
        PlaneInfo,
        SceneConfig,
        SphereInfo,
        SpotlightInfo,
        TextureInfo,
    )

    return SceneConfig(
        shapes=(
            SphereInfo(
                center=(0.0, 0.0, 100.0),
                radius=60.0,
                texture=TextureInfo.solid(MaterialInfo((0.0, 1.0, 0.0), 0.3, 0.6)),
            ),
            PlaneInfo(
                normal=(0.0, 1.0, 0.0),
                distance=50.0,
                texture=TextureInfo.checker(
                    MaterialInfo((1.0, 1.0, 1.0), 0.0, 0.5),
                    MaterialInfo((0.0, 0.0, 0.0), 0.0, 0.5),
                    scale=20.0,
                ),
            ),
        ),
        lights=(
            SpotlightInfo(position=(-100.0, -200.0, -50.0), color=(0.9, 0.9, 0.9)),
            DirectionalLightInfo(direction=(0.0, 1.0, 1.0), color=(0.5, 0.5, 0.5)),
        ),
        ambient=(0.1, 0.1, 0.1),
        background=(0.0, 0.0, 0.2),
    )


class TestValidation:
    """Tests for dataclass validation."""

    def test_material_coefficients(self):
        """Test coefficients outside [0, 1] are rejected."""
        from src.glint.scene.description import MaterialInfo

        with pytest.raises(ValueError, match="diffuseness"):
            MaterialInfo((1.0, 1.0, 1.0), diffuseness=1.5)
        with pytest.raises(ValueError, match="reflectivity"):
            MaterialInfo((1.0, 1.0, 1.0), reflectivity=-0.1)

    def test_sphere_radius(self):
        """Test sphere radius must be positive."""
        from src.glint.scene.description import MaterialInfo, SphereInfo, TextureInfo

        with pytest.raises(ValueError, match="radius"):
            SphereInfo((0.0, 0.0, 0.0), 0.0, TextureInfo.solid(MaterialInfo((1.0, 1.0, 1.0))))

    def test_plane_normal(self):
        """Test a zero plane normal is rejected."""
        from src.glint.scene.description import MaterialInfo, PlaneInfo, TextureInfo

        with pytest.raises(ValueError, match="normal"):
            PlaneInfo((0.0, 0.0, 0.0), 1.0, TextureInfo.solid(MaterialInfo((1.0, 1.0, 1.0))))

    def test_checker_requires_secondary(self):
        """Test a checker texture needs two materials and a positive scale."""
        from src.glint.materials.texture import TextureKind
        from src.glint.scene.description import MaterialInfo, TextureInfo

        white = MaterialInfo((1.0, 1.0, 1.0))
        with pytest.raises(ValueError, match="secondary"):
            TextureInfo(kind=TextureKind.CHECKER, primary=white)
        with pytest.raises(ValueError, match="scale"):
            TextureInfo.checker(white, white, scale=0.0)

    def test_scene_accepts_lists(self):
        """Test shapes and lights given as lists are stored as tuples."""
        from src.glint.scene.description import SceneConfig

        config = _sample_config()
        rebuilt = SceneConfig(shapes=list(config.shapes), lights=list(config.lights))
        assert isinstance(rebuilt.shapes, tuple)
        assert isinstance(rebuilt.lights, tuple)


class TestSerialization:
    """Tests for dictionary and JSON round trips."""

    def test_dict_round_trip(self):
        """Test to_dict/from_dict preserve the scene."""
        from src.glint.scene.description import SceneConfig

        config = _sample_config()
        assert SceneConfig.from_dict(config.to_dict()) == config

    def test_material_shorthand(self):
        """Test a shape may give a material instead of a texture."""
        from src.glint.materials.texture import TextureKind
        from src.glint.scene.description import shape_from_dict

        shape = shape_from_dict(
            {"type": "sphere", "center": [1, 2, 3], "radius": 4, "material": {"color": [1, 0, 0]}}
        )
        assert shape.center == (1.0, 2.0, 3.0)
        assert shape.texture.kind == TextureKind.SOLID
        assert shape.texture.primary.color == (1.0, 0.0, 0.0)
        assert shape.texture.primary.diffuseness == 1.0

    def test_light_type_aliases(self):
        """Test 'spot' and 'spotlight' both name a spotlight."""
        from src.glint.scene.description import SpotlightInfo, light_from_dict

        for tag in ("spot", "spotlight", "Spotlight"):
            light = light_from_dict({"type": tag, "position": [0, 0, 0], "color": [1, 1, 1]})
            assert isinstance(light, SpotlightInfo)

    def test_unknown_types(self):
        """Test unknown type tags are rejected."""
        from src.glint.scene.description import TextureInfo, light_from_dict, shape_from_dict

        with pytest.raises(ValueError, match="shape type"):
            shape_from_dict({"type": "cube"})
        with pytest.raises(ValueError, match="light type"):
            light_from_dict({"type": "area"})
        with pytest.raises(ValueError, match="texture type"):
            TextureInfo.from_dict({"type": "marble"})

    def test_file_round_trip_with_view(self, tmp_path):
        """Test save_scene_file/load_scene_file preserve scene and view."""
        from src.glint.scene.description import load_scene_file, save_scene_file
        from src.glint.scene.reference import create_reference_view

        path = tmp_path / "scene.json"
        config = _sample_config()
        view = create_reference_view()
        save_scene_file(config, path, view=view)

        loaded_config, loaded_view = load_scene_file(path)
        assert loaded_config == config
        assert loaded_view == view

    def test_bare_scene_file(self, tmp_path):
        """Test a file holding only a scene dictionary has no view."""
        from src.glint.scene.description import load_scene_file

        path = tmp_path / "bare.json"
        path.write_text(json.dumps(_sample_config().to_dict()), encoding="utf-8")

        config, view = load_scene_file(path)
        assert config == _sample_config()
        assert view is None

    def test_non_object_file(self, tmp_path):
        """Test a JSON file that is not an object is rejected."""
        from src.glint.scene.description import load_scene_file

        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_scene_file(path)


class TestSceneManager:
    """Tests for uploading a scene into Taichi fields."""

    def test_counts_and_config(self):
        """Test counts and the stored description."""
        from src.glint.scene.manager import SceneManager

        config = _sample_config()
        scene = SceneManager(config)

        assert scene.shape_count == 2
        assert scene.light_count == 2
        assert scene.config is config
        assert scene.get_shape_info(1) is config.shapes[1]
        assert repr(scene) == "SceneManager(shapes=2, lights=2)"

    def test_shape_fields(self):
        """Test shape kinds, geometry and textures are uploaded."""
        from src.glint.geometry.shape import ShapeKind
        from src.glint.materials.texture import TextureKind
        from src.glint.scene.manager import SceneManager

        scene = SceneManager(_sample_config())

        assert scene.shapes.kind[0] == int(ShapeKind.SPHERE)
        assert scene.shapes.radius[0] == 60.0
        assert scene.shapes.center[0][2] == 100.0
        assert scene.shapes.texture.primary.diffuseness[0] == 0.6

        assert scene.shapes.kind[1] == int(ShapeKind.PLANE)
        assert scene.shapes.distance[1] == 50.0
        assert scene.shapes.texture.kind[1] == int(TextureKind.CHECKER)
        assert scene.shapes.texture.scale[1] == 20.0
        assert scene.shapes.texture.secondary.color[1][0] == 0.0

    def test_light_fields(self):
        """Test light kinds and vectors are uploaded."""
        from src.glint.lighting.light import LightKind
        from src.glint.scene.manager import SceneManager

        scene = SceneManager(_sample_config())

        assert scene.lights.kind[0] == int(LightKind.SPOT)
        assert scene.lights.vector[0][1] == -200.0
        assert scene.lights.kind[1] == int(LightKind.DIRECTIONAL)
        assert scene.lights.vector[1][2] == 1.0
        assert scene.ambient[None][0] == 0.1
        assert scene.background[None][2] == 0.2

    def test_empty_scene(self):
        """Test a scene without shapes or lights can be uploaded."""
        from src.glint.scene.description import SceneConfig
        from src.glint.scene.manager import SceneManager

        scene = SceneManager(SceneConfig())
        assert scene.shape_count == 0
        assert scene.light_count == 0

    def test_unsupported_shape(self):
        """Test objects that are not shape descriptions are rejected."""
        from src.glint.scene.description import SceneConfig
        from src.glint.scene.manager import SceneManager

        with pytest.raises(TypeError, match="Unsupported shape"):
            SceneManager(SceneConfig(shapes=("not a shape",)))


class TestReferenceScene:
    """Tests for the built-in reference scene."""

    def test_contents(self):
        """Test the reference scene's shapes, lights and view."""
        from src.glint.materials.texture import TextureKind
        from src.glint.scene.description import PlaneInfo, SphereInfo, SpotlightInfo
        from src.glint.scene.reference import create_reference_scene, create_reference_view

        config = create_reference_scene()
        ground, green, checker = config.shapes

        assert isinstance(ground, PlaneInfo)
        assert ground.normal == (0.0, 1.0, 0.0)
        assert ground.distance == 50.0
        assert ground.texture.primary.color == (1.0, 0.0, 0.0)
        assert ground.texture.primary.reflectivity == 0.5
        assert ground.texture.primary.diffuseness == 0.8

        assert isinstance(green, SphereInfo)
        assert green.center == (-40.0, 20.0, 120.0)
        assert green.radius == 30.0

        assert checker.radius == 50.0
        assert checker.texture.kind == TextureKind.CHECKER
        assert checker.texture.scale == 20.0

        assert all(isinstance(light, SpotlightInfo) for light in config.lights)
        assert config.lights[0].position == (-100.0, -200.0, -50.0)
        assert config.lights[1].color == (0.8, 0.8, 0.85)
        assert config.ambient == (0.1, 0.1, 0.1)
        assert config.background == (0.0, 0.0, 0.0)

        view = create_reference_view()
        assert view.position == (0.0, 0.0, -100.0)
        assert view.view_distance == 250.0

    def test_params_override(self):
        """Test ReferenceSceneParams recolors the scene."""
        from src.glint.scene.reference import ReferenceSceneParams, create_reference_scene

        params = ReferenceSceneParams(
            key_light_color=(1.0, 0.9, 0.8),
            ground_color=(0.2, 0.2, 0.8),
        )
        config = create_reference_scene(params)

        assert config.lights[0].color == (1.0, 0.9, 0.8)
        assert config.shapes[0].texture.primary.color == (0.2, 0.2, 0.8)
        # Unchanged defaults
        assert config.shapes[1].texture.primary.color == (0.0, 1.0, 0.0)
