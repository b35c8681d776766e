"""Graphics for SKYFLAP."""

from skyflap.graphics.scene import SceneRenderer

__all__ = ["SceneRenderer"]
