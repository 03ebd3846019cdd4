"""3D math, bounding volumes, cameras, frustum culling, skinning weights and material export helpers."""

__version__ = "0.1.0"

__all__ = ["math3d", "bounds", "camera", "frustum", "skin", "export"]