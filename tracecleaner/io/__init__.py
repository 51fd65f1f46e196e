from .trace_io import coerce_envelope, load_trace_file, save_trace_file

__all__ = ["coerce_envelope", "load_trace_file", "save_trace_file"]
