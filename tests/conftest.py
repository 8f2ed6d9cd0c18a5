"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Kernels work in
    double precision, so the default float type is f64.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=42)
    yield
    # Note: We don't call ti.reset() here as it can cause issues
    # with subsequent tests if any cleanup happens after


def make_scene(shapes=(), lights=(), ambient=(0.0, 0.0, 0.0), background=(0.0, 0.0, 0.0)):
    """Upload a small scene for kernel-side tests."""
    from src.glint.scene.description import SceneConfig
    from src.glint.scene.manager import SceneManager

    return SceneManager(
        SceneConfig(shapes=shapes, lights=lights, ambient=ambient, background=background)
    )


def solid(color, reflectivity=0.0, diffuseness=1.0):
    """Solid texture with a single material."""
    from src.glint.scene.description import MaterialInfo, TextureInfo

    return TextureInfo.solid(
        MaterialInfo(color=color, reflectivity=reflectivity, diffuseness=diffuseness)
    )
