"""Path resolution, codecs, schemas and the error taxonomy."""
