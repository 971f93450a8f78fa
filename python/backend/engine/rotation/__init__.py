from backend.engine.rotation.rotator import Rotator

__all__ = ["Rotator"]
