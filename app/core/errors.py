from __future__ import annotations


class AnalysisError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class UnsupportedFormatError(AnalysisError):
    def __init__(self, extension: str):
        label = extension or "(sin extensión)"
        super().__init__(f"Formato de archivo no soportado: {label}", status_code=400)
        self.extension = extension


class DocumentNotFoundError(AnalysisError):
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ParseFailureError(AnalysisError):
    def __init__(self, message: str):
        super().__init__(message, status_code=500)
