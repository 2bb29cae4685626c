from pathtracer.camera.camera import Camera, CameraSettings

__all__ = ["Camera", "CameraSettings"]
