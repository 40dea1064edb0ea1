"""fftcorr - error model for the FFT cross-correlation pipeline.

Provides:
- CorrelationError and its closed set of variants
- The Result[T] contract returned by fallible pipeline operations
- A boundary helper that runs black-box stages and reports their failures
"""

__version__ = "0.1.0"

from fftcorr.errors import CorrelationError, ErrorKind, FftProcessing, fft_errors
from fftcorr.result import Err, Ok, Result, attempt, is_err, is_ok, returns_result

__all__ = [
    "__version__",
    "CorrelationError",
    "ErrorKind",
    "FftProcessing",
    "fft_errors",
    "Err",
    "Ok",
    "Result",
    "attempt",
    "is_err",
    "is_ok",
    "returns_result",
]
