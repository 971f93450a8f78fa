from backend.engine.boardimport.importer import BoardImporter, BoardPayload

__all__ = ["BoardImporter", "BoardPayload"]
