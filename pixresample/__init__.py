"""pixresample: separable antialiased resizing of 2D pixel images.

.. include:: ../README.md
"""

from __future__ import annotations

__docformat__ = 'google'
__version__ = '0.1.0'
__version_info__ = tuple(int(num) for num in __version__.split('.'))

from collections.abc import Callable
import abc
import contextlib
import dataclasses
import enum
import functools
import logging
import typing
from typing import Any

import numba
import numpy as np
import numpy.typing as npt
import scipy.sparse

if typing.TYPE_CHECKING:
  _DType = np.dtype[Any]
  _NDArray = npt.NDArray[Any]
  _ArrayLike = npt.ArrayLike
else:
  _DType = Any
  _NDArray = Any
  _ArrayLike = Any  # Else `pdoc` uses a long type expression for documentation.

_logger = logging.getLogger(__name__)


def _check_eq(a: Any, b: Any) -> None:
  """If the two values or arrays are not equal, raise an exception with a useful message."""
  are_equal = np.all(a == b) if isinstance(a, np.ndarray) else a == b
  if not are_equal:
    raise AssertionError(f'{a!r} == {b!r}')


class ModeError(ValueError):
  """The pixel formats of two images differ, or a pixel format is unsupported by an operation."""


class AllocationError(MemoryError):
  """An image buffer could not be allocated."""


@dataclasses.dataclass(frozen=True)
class PixelFormat:
  """Description of the sample layout of an image mode.

  Each pixel holds `bands` samples of type `dtype`.  Single-band images are stored as arrays of
  shape `(height, width)` and multi-band images as arrays of shape `(height, width, bands)`.
  """

  name: str
  """Mode name, e.g. `'L'`, `'RGB'`, `'I'`, or `'F'`."""

  dtype: _DType
  """Numpy type of one sample."""

  bands: int = 1
  """Number of channels per pixel."""

  interpolable: bool = True
  """False if sample values are indices or bits, for which weighted averages are meaningless."""

  def shape(self, width: int, height: int) -> tuple[int, ...]:
    """Return the array shape of an image of this format with the given size."""
    return (height, width) if self.bands == 1 else (height, width, self.bands)


MODES = {
    fmt.name: fmt for fmt in [
        PixelFormat('1', np.dtype(np.uint8), interpolable=False),
        PixelFormat('L', np.dtype(np.uint8)),
        PixelFormat('P', np.dtype(np.uint8), interpolable=False),
        PixelFormat('LA', np.dtype(np.uint8), bands=2),
        PixelFormat('RGB', np.dtype(np.uint8), bands=3),
        PixelFormat('RGBA', np.dtype(np.uint8), bands=4),
        PixelFormat('RGBX', np.dtype(np.uint8), bands=4),
        PixelFormat('CMYK', np.dtype(np.uint8), bands=4),
        PixelFormat('YCbCr', np.dtype(np.uint8), bands=3),
        PixelFormat('I', np.dtype(np.int32)),
        PixelFormat('F', np.dtype(np.float32)),
        PixelFormat('I;16', np.dtype(np.uint16)),
    ]
}
"""Supported image modes, keyed by name.

| mode      | sample type | bands | notes |
|-----------|-------------|-------|-------|
| `'1'`     | uint8       | 1     | bilevel (0 or 255); cannot be `resize`d |
| `'L'`     | uint8       | 1     | luminance |
| `'P'`     | uint8       | 1     | palette indices; cannot be `resize`d |
| `'LA'`    | uint8       | 2     | luminance and alpha |
| `'RGB'`   | uint8       | 3     | |
| `'RGBA'`  | uint8       | 4     | |
| `'RGBX'`  | uint8       | 4     | RGB with padding |
| `'CMYK'`  | uint8       | 4     | |
| `'YCbCr'` | uint8       | 3     | |
| `'I'`     | int32       | 1     | |
| `'F'`     | float32     | 1     | |
| `'I;16'`  | uint16      | 1     | storage only; not resampled |
"""

_MODE_FROM_DTYPE_AND_BANDS = {
    ('uint8', 1): 'L',
    ('uint8', 2): 'LA',
    ('uint8', 3): 'RGB',
    ('uint8', 4): 'RGBA',
    ('int32', 1): 'I',
    ('float32', 1): 'F',
    ('uint16', 1): 'I;16',
}


def _get_format(mode: str) -> PixelFormat:
  """Return the `PixelFormat` of a mode name in `MODES`."""
  try:
    return MODES[mode]
  except KeyError:
    raise ModeError(f'Unrecognized image mode {mode!r}.') from None


class Image:
  """A 2D grid of pixels with an explicit mode, width, and height.

  The pixel buffer is a row-major numpy array; see `PixelFormat.shape`.  An image owns its buffer
  until `close()` is called, after which any access to `pixels` fails.  Images are context
  managers that close on exit.
  """

  def __init__(self, mode: str, pixels: _NDArray) -> None:
    fmt = _get_format(mode)
    if pixels.dtype != fmt.dtype:
      raise ModeError(f'Mode {mode!r} requires type {fmt.dtype}, not {pixels.dtype}.')
    if pixels.ndim not in (2, 3) or pixels.shape[2:] != fmt.shape(0, 0)[2:]:
      raise ValueError(f'Array shape {pixels.shape} is incompatible with mode {mode!r}.')
    self.mode = mode
    self.height, self.width = pixels.shape[:2]
    self._pixels: _NDArray | None = pixels

  @classmethod
  def new(cls, mode: str, width: int, height: int) -> Image:
    """Allocate a zero-initialized image.

    Args:
      mode: A name in `MODES`.
      width: Number of columns; may be zero.
      height: Number of rows; may be zero.

    Raises:
      ModeError: If `mode` is unrecognized.
      ValueError: If a dimension is negative.
      AllocationError: If the buffer cannot be allocated.
    """
    fmt = _get_format(mode)
    if width < 0 or height < 0:
      raise ValueError(f'Image size ({width}, {height}) has a negative dimension.')
    try:
      pixels = np.zeros(fmt.shape(width, height), fmt.dtype)
    except (MemoryError, ValueError) as e:  # numpy raises ValueError if the size overflows.
      raise AllocationError(f'Cannot allocate {mode!r} image of size ({width}, {height}).') from e
    return cls(mode, pixels)

  @classmethod
  def fromarray(cls, array: _ArrayLike, mode: str | None = None) -> Image:
    """Create an image holding a copy of `array`.

    If `mode` is None, it is inferred from the array type and the number of channels:
    uint8 arrays map to `'L'`, `'LA'`, `'RGB'`, or `'RGBA'`, int32 to `'I'`, float32 to `'F'`,
    and uint16 to `'I;16'`.  Otherwise the array is converted to the sample type of `mode`.
    """
    array = np.asarray(array)
    if array.ndim not in (2, 3):
      raise ValueError(f'Array shape {array.shape} is not that of an image.')
    if mode is None:
      bands = 1 if array.ndim == 2 else array.shape[2]
      mode = _MODE_FROM_DTYPE_AND_BANDS.get((array.dtype.name, bands))
      if mode is None:
        raise ModeError(f'Cannot infer a mode for type {array.dtype} with {bands} channels.')
    fmt = _get_format(mode)
    return cls(mode, np.array(array, fmt.dtype))

  @property
  def format(self) -> PixelFormat:
    return MODES[self.mode]

  @property
  def size(self) -> tuple[int, int]:
    """The image dimensions as `(width, height)`."""
    return self.width, self.height

  @property
  def closed(self) -> bool:
    return self._pixels is None

  @property
  def pixels(self) -> _NDArray:
    """The pixel buffer, of shape `self.format.shape(self.width, self.height)`."""
    if self._pixels is None:
      raise ValueError('Operation on closed image.')
    return self._pixels

  def close(self) -> None:
    """Release the pixel buffer.  Closing an image more than once has no effect."""
    self._pixels = None

  def __enter__(self) -> Image:
    return self

  def __exit__(self, *unused_exc_info: Any) -> None:
    self.close()

  def __repr__(self) -> str:
    state = ' closed' if self.closed else ''
    return f'<Image mode={self.mode} size={self.width}x{self.height}{state}>'


def transpose(dst: Image, src: Image) -> Image:
  """Write the transpose of `src` into `dst`, so that rows of `src` become columns of `dst`."""
  src_pixels, dst_pixels = src.pixels, dst.pixels
  if src.mode != dst.mode:
    raise ModeError(f'Cannot transpose mode {src.mode!r} into mode {dst.mode!r}.')
  if dst.size != (src.height, src.width):
    raise ValueError(f'Transpose of size {src.size} requires size {(src.height, src.width)},'
                     f' not {dst.size}.')
  dst_pixels[...] = np.swapaxes(src_pixels, 0, 1)
  return dst


def _sinc(x: _ArrayLike) -> _NDArray:
  """Return the value `np.sinc(x)` but improved to:
  (1) ignore underflow that occurs at 0.0 for np.float32, and
  (2) output exact zero for integer input values.

  >>> _sinc(np.array([-3, -2, -1, 0], dtype=np.float32))
  array([0., 0., 0., 1.], dtype=float32)

  >>> _sinc(0)
  1.0
  """
  x = np.asarray(x)
  x_is_scalar = x.ndim == 0
  with np.errstate(under='ignore'):
    result = np.sinc(np.atleast_1d(x))
    result[x == np.floor(x)] = 0.0
    result[x == 0] = 1.0
    return result.item() if x_is_scalar else result


@dataclasses.dataclass(frozen=True)
class Filter:
  """Abstract base class for filter kernel functions.

  Each kernel is evaluated at offsets `x` measured in source samples from the center of a
  destination sample.  When downsampling, the planner stretches the kernel by the scaling factor.
  """

  name: str
  """Filter kernel name."""

  radius: float
  """Support of the kernel: self(x) is zero whenever abs(x) >= radius."""

  @abc.abstractmethod
  def __call__(self, x: _ArrayLike) -> _NDArray:
    """Return evaluation of filter kernel at locations x."""


class BoxFilter(Filter):
  """Nearest-neighbor kernel, with value 1.0 over the half-open interval [-.5, .5)."""

  def __init__(self) -> None:
    super().__init__(name='nearest', radius=0.5)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.asarray(x)
    return np.where((-0.5 <= x) & (x < 0.5), 1.0, 0.0)


class TriangleFilter(Filter):
  """See https://en.wikipedia.org/wiki/Triangle_function.

  Also known as the hat or tent function.  It is used for piecewise-linear
  (or bilinear, or trilinear, ...) interpolation.
  """

  def __init__(self) -> None:
    super().__init__(name='bilinear', radius=1.0)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    return (1.0 - np.abs(x)).clip(0.0, 1.0)


class CubicFilter(Filter):
  """Cubic convolution kernel with free parameter `a`.

  Args:
    a: Value of the kernel derivative at x = 1.  The default -0.5 gives the Catmull-Rom spline.

  [R. G. Keys.  Cubic convolution interpolation for digital image processing.
  IEEE Trans. on Acoustics, Speech, and Signal Processing, 29(6), 1981.]
  https://en.wikipedia.org/wiki/Bicubic_interpolation#Bicubic_convolution_algorithm
  """

  def __init__(self, *, a: float = -0.5) -> None:
    super().__init__(name='bicubic', radius=2.0)
    self.a = a

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.abs(x)
    a = self.a
    v01 = ((a + 2.0) * x - (a + 3.0)) * x * x + 1.0
    v12 = (((x - 5.0) * x + 8.0) * x - 4.0) * a
    return np.where(x < 1.0, v01, np.where(x < 2.0, v12, 0.0))


class LanczosFilter(Filter):
  """Sinc function modulated by a sinc window, i.e. a truncated sinc.

  Args:
    radius: Specifies the support window [-radius, radius) over which the filter is nonzero.

  See https://en.wikipedia.org/wiki/Lanczos_kernel.
  """

  def __init__(self, *, radius: int = 3) -> None:
    super().__init__(name='antialias' if radius == 3 else f'lanczos{radius}', radius=radius)

  def __call__(self, x: _ArrayLike) -> _NDArray:
    x = np.asarray(x)
    radius = self.radius
    return np.where((-radius <= x) & (x < radius), _sinc(x) * _sinc(x / radius), 0.0)


class Resampling(enum.IntEnum):
  """Integer tags selecting the built-in filters."""

  NEAREST = 0
  ANTIALIAS = 1
  BILINEAR = 2
  BICUBIC = 3


_DEFAULT_FILTER = 'antialias'

_DICT_FILTERS = {
    'nearest': BoxFilter(),
    'bilinear': TriangleFilter(),
    'bicubic': CubicFilter(),
    'antialias': LanczosFilter(radius=3),
}
_DICT_FILTERS['lanczos'] = _DICT_FILTERS['antialias']

FILTERS = list(_DICT_FILTERS)[:4]
r"""Names of the built-in filter kernels.

| name          | `Filter`                  | `Resampling` tag | radius |
|---------------|---------------------------|------------------|--------|
| `'nearest'`   | `BoxFilter()`             | `NEAREST`        | 0.5 |
| `'bilinear'`  | `TriangleFilter()`        | `BILINEAR`       | 1.0 |
| `'bicubic'`   | `CubicFilter`(a=-0.5)     | `BICUBIC`        | 2.0 |
| `'antialias'` | `LanczosFilter`(radius=3) | `ANTIALIAS`      | 3.0 |

The name `'lanczos'` is accepted as an alias of `'antialias'`.
"""


def _get_filter(filter: str | int | Filter) -> Filter:
  """Return a `Filter`, specified as an instance, a name in `FILTERS`, or a `Resampling` tag."""
  if isinstance(filter, Filter):
    return filter
  if isinstance(filter, (int, np.integer)) and not isinstance(filter, bool):
    try:
      filter = Resampling(filter).name.lower()
    except ValueError:
      raise ValueError(f'Unsupported resampling filter {filter!r}.') from None
  try:
    return _DICT_FILTERS[filter]
  except (KeyError, TypeError):
    raise ValueError(f'Unsupported resampling filter {filter!r}.') from None


@dataclasses.dataclass(frozen=True)
class ResamplePlan:
  """Coefficients for 1D resampling from `src_size` samples to `dst_size` samples.

  The un-normalized weights are stored once in a sparse matrix whose row `xx` holds exactly the
  columns `xmin[xx]` to `xmax[xx] - 1` in increasing order, so that `weights.indptr` is an offset
  table into the flat coefficient array `weights.data`.
  """

  src_size: int
  dst_size: int
  xmin: _NDArray
  """First contributing source index for each destination sample."""
  xmax: _NDArray
  """One past the last contributing source index for each destination sample."""
  weights: scipy.sparse.csr_matrix
  """Un-normalized weights, of shape `(dst_size, src_size)`."""
  norm: _NDArray
  """Reciprocal of each row sum of `weights`, or 1.0 where that sum is zero."""


def plan_axis(src_size: int, dst_size: int,
              filter: str | int | Filter = _DEFAULT_FILTER) -> ResamplePlan:
  """Compute the weights for 1D resampling of `src_size` samples into `dst_size` samples.

  Destination sample `xx` is centered at source position `center = (xx + 0.5) * scale`, where
  `scale = src_size / dst_size`.  When downsampling (`scale > 1`), the kernel is stretched by
  `scale` to prevent aliasing; when upsampling, it keeps its native width.  Windows are clamped to
  the source domain, and the weights are later renormalized by `norm`.

  Args:
    src_size: Number of source samples.
    dst_size: Number of destination samples.  A value of zero gives an empty plan.
    filter: The kernel, as a name in `FILTERS`, a `Resampling` tag, or a `Filter` instance.

  Returns:
    The `ResamplePlan` of the axis.

  >>> plan = plan_axis(4, 2, 'bilinear')
  >>> plan.xmin.tolist(), plan.xmax.tolist()
  ([0, 1], [3, 4])
  """
  filter = _get_filter(filter)
  if src_size < 0 or dst_size < 0:
    raise ValueError(f'Sizes {src_size} and {dst_size} must be non-negative.')
  if dst_size == 0:
    empty = np.zeros(0, np.int64)
    weights = scipy.sparse.csr_matrix(
        (np.zeros(0), empty, np.zeros(1, np.int64)), shape=(0, src_size))
    return ResamplePlan(src_size, 0, empty, empty.copy(), weights, np.zeros(0))

  scale = src_size / dst_size
  filterscale = max(scale, 1.0)
  support = filter.radius * filterscale
  center = (np.arange(dst_size) + 0.5) * scale
  xmin = np.maximum(np.floor(center - support), 0.0).astype(np.int64)
  xmax = np.minimum(np.ceil(center + support), src_size).astype(np.int64)
  counts = xmax - xmin
  num_taps = int(counts.max())

  src_index = xmin[:, None] + np.arange(num_taps)  # (dst_size, num_taps)
  inside = src_index < xmax[:, None]
  x = (src_index - center[:, None] + 0.5) / filterscale
  weight = np.where(inside, filter(x) / filterscale, 0.0)
  weight_sum = weight.sum(axis=-1)
  norm = np.ones(dst_size)
  nonzero = weight_sum != 0.0
  norm[nonzero] = 1.0 / weight_sum[nonzero]

  indptr = np.concatenate([[0], np.cumsum(counts)])
  # Boolean indexing visits the rows in order, so each row keeps its increasing columns.
  weights = scipy.sparse.csr_matrix(
      (weight[inside], src_index[inside], indptr), shape=(dst_size, src_size))
  _logger.debug('Planned %d -> %d samples with filter %r (scale %g, up to %d taps).',
                src_size, dst_size, filter.name, scale, num_taps)
  return ResamplePlan(src_size, dst_size, xmin, xmax, weights, norm)


def _reduce_rows_loop(data: _NDArray, indices: _NDArray, indptr: _NDArray,
                      rows: _NDArray, sums: _NDArray) -> None:
  """Accumulate `sums[y, xx, c] = sum_k data[k] * rows[y, indices[k], c]` over the row `xx`."""
  height, _, ch = rows.shape
  dst_size = len(indptr) - 1
  for y in range(height):
    for xx in range(dst_size):
      begin, end = indptr[xx], indptr[xx + 1]
      for c in range(ch):
        total = 0.0
        for k in range(begin, end):
          total += data[k] * rows[y, indices[k], c]
        sums[y, xx, c] = total


@functools.lru_cache()
def _create_numba_reduce_rows() -> Callable[..., None]:
  """Lazily invoke `numba.njit` on `_reduce_rows_loop`."""
  jitted: Callable[..., None] = numba.njit(_reduce_rows_loop)
  return jitted


def _reduce_rows(plan: ResamplePlan, rows: _NDArray, *, jit: bool = True) -> _NDArray:
  """Return the weighted sums along axis 1 of `rows`, which has shape `(height, src_size, ch)`.

  The result is a float64 array of shape `(height, plan.dst_size, ch)`.  Both evaluation paths
  accumulate the products in the same order.
  """
  height, src_size, ch = rows.shape
  _check_eq(src_size, plan.src_size)
  if jit:
    sums = np.empty((height, plan.dst_size, ch))
    weights = plan.weights
    _create_numba_reduce_rows()(weights.data, weights.indices, weights.indptr, rows, sums)
    return sums
  # Calls scipy's csr_matvecs, which accumulates each row of products in index order.
  array_flat = np.moveaxis(rows, 1, 0).reshape(src_size, height * ch).astype(np.float64)
  sums_flat = plan.weights @ array_flat
  return np.moveaxis(np.asarray(sums_flat).reshape(plan.dst_size, height, ch), 0, 1)


_DEFAULT_INTEGER_ROUNDING = 'legacy'

INTEGER_ROUNDINGS = ['legacy', 'scaled']
"""Orders of truncation for 32-bit integer images:

- `'legacy'`: the weighted sum is truncated to an integer before multiplication by the
  normalization factor, and the product is truncated again.  This reproduces earlier output.
- `'scaled'`: the normalized weighted sum is truncated once, which is more accurate.
"""


def _finalize(sums: _NDArray, norm: _NDArray, dtype: _DType,
              integer_rounding: str = _DEFAULT_INTEGER_ROUNDING) -> _NDArray:
  """Normalize weighted `sums` (along axis 1) and convert them to samples of type `dtype`."""
  norm = norm[:, None]
  if dtype == np.uint8:
    # Rounds half up, as astype() truncates the nonnegative values after saturation.
    return (sums * norm + 0.5).clip(0.0, 255.0).astype(np.uint8)
  if dtype == np.int32:
    if integer_rounding == 'legacy':
      value = np.trunc(sums) * norm
    else:
      value = sums * norm
    info = np.iinfo(np.int32)
    return np.trunc(value).clip(info.min, info.max).astype(np.int32)
  if dtype == np.float32:
    return (sums * norm).astype(np.float32)
  raise ModeError(f'Samples of type {dtype} cannot be resampled.')


def _as_rows(pixels: _NDArray) -> _NDArray:
  """Return a view of `pixels` with shape `(height, width, bands)`."""
  return pixels[..., None] if pixels.ndim == 2 else pixels


def resample_axis(
    dst: Image,
    src: Image,
    filter: str | int | Filter = _DEFAULT_FILTER,
    *,
    lock: contextlib.AbstractContextManager[Any] | None = None,
    integer_rounding: str = _DEFAULT_INTEGER_ROUNDING,
    jit: bool = True,
) -> Image:
  """Resample the rows of `src` into the rows of `dst`, changing only the width.

  Args:
    dst: Destination image, whose width sets the resampled row length.  It must have the same mode
      and height as `src`.  Its pixels are overwritten.
    src: Source image.
    filter: The kernel, as a name in `FILTERS`, a `Resampling` tag, or a `Filter` instance.
    lock: Optional context manager (e.g. a `threading.Lock`) held while the pixels are being
      computed and written, to exclude concurrent mutation of the images.
    integer_rounding: Truncation order for mode `'I'`; a name in `INTEGER_ROUNDINGS`.
    jit: If True, evaluate the weighted sums with a `numba`-compiled loop; otherwise use a
      `scipy.sparse` matrix product.  Both give the same result.

  Returns:
    The image `dst`.

  Raises:
    ModeError: If the modes differ or the mode has no resampling arithmetic.
    ValueError: If the heights differ, or `filter` or `integer_rounding` is unsupported.
  """
  src_pixels, dst_pixels = src.pixels, dst.pixels
  if src.mode != dst.mode:
    raise ModeError(f'Source mode {src.mode!r} differs from destination mode {dst.mode!r}.')
  if dst.height != src.height:
    raise ValueError(f'Resampling along an axis requires equal heights, not {src.height}'
                     f' and {dst.height}.')
  filter = _get_filter(filter)
  if integer_rounding not in INTEGER_ROUNDINGS:
    raise ValueError(f'Integer rounding {integer_rounding!r} is not in {INTEGER_ROUNDINGS}.')
  dtype = src.format.dtype
  if dtype not in (np.uint8, np.int32, np.float32):
    raise ModeError(f'Mode {src.mode!r} cannot be resampled.')

  plan = plan_axis(src.width, dst.width, filter)
  with lock if lock is not None else contextlib.nullcontext():
    sums = _reduce_rows(plan, _as_rows(src_pixels), jit=jit)
    result = _finalize(sums, plan.norm, dtype, integer_rounding)
    dst_pixels[...] = result.reshape(dst_pixels.shape)
  return dst


def resize(
    dst: Image,
    src: Image,
    filter: str | int | Filter = _DEFAULT_FILTER,
    *,
    lock: contextlib.AbstractContextManager[Any] | None = None,
    integer_rounding: str = _DEFAULT_INTEGER_ROUNDING,
    jit: bool = True,
) -> Image:
  """Resize `src` into `dst`, whose width and height are the target size.

  The resize is separable: the rows are resampled to the new width, the intermediate image is
  transposed, its rows are resampled to the new height, and the result is transposed into `dst`.
  Each intermediate image is released once consumed, and all of them are released if any stage
  fails.

  Args:
    dst: Destination image of the same mode as `src`.  Its pixels are overwritten.
    src: Source image.  Palette (`'P'`) and bilevel (`'1'`) images are rejected.
    filter: The kernel, as a name in `FILTERS`, a `Resampling` tag, or a `Filter` instance.
    lock: Optional context manager held during the computation of each pass.
    integer_rounding: Truncation order for mode `'I'`; a name in `INTEGER_ROUNDINGS`.
    jit: If True, use the `numba`-compiled inner loop; otherwise a `scipy.sparse` product.

  Returns:
    The image `dst`.

  Raises:
    ModeError: If `src` is a palette or bilevel image, or if the modes differ.
    ValueError: If `filter` or `integer_rounding` is unsupported.
    AllocationError: If an intermediate image cannot be allocated.

  >>> src = Image.fromarray(np.array([[10, 20, 30, 40, 50, 60, 70, 80]], np.uint8))
  >>> resize(Image.new('L', 4, 1), src, 'bilinear').pixels.tolist()
  [[17, 35, 55, 73]]
  """
  if not src.format.interpolable:
    raise ModeError(f'Mode {src.mode!r} cannot be resized by interpolation.')
  if src.mode != dst.mode:
    raise ModeError(f'Source mode {src.mode!r} differs from destination mode {dst.mode!r}.')
  kwargs: Any = dict(lock=lock, integer_rounding=integer_rounding, jit=jit)
  width, height = dst.size
  _logger.debug('Resizing %r image from %s to %s.', src.mode, src.size, dst.size)

  with contextlib.ExitStack() as stack:
    temp1 = stack.enter_context(Image.new(src.mode, width, src.height))
    resample_axis(temp1, src, filter, **kwargs)
    temp2 = stack.enter_context(Image.new(src.mode, src.height, width))
    transpose(temp2, temp1)
    temp1.close()
    temp3 = stack.enter_context(Image.new(src.mode, height, width))
    resample_axis(temp3, temp2, filter, **kwargs)
    temp2.close()
    transpose(dst, temp3)
  return dst


def resize_array(array: _ArrayLike, shape: tuple[int, int], *,
                 filter: str | int | Filter = _DEFAULT_FILTER, mode: str | None = None,
                 **kwargs: Any) -> _NDArray:
  """Return a copy of the image `array` resized to `shape = (height, width)`.

  Args:
    array: Image samples of shape `(height, width)` or `(height, width, bands)`.
    shape: The new `(height, width)`.
    filter: The kernel, as a name in `FILTERS`, a `Resampling` tag, or a `Filter` instance.
    mode: The image mode of `array`; see `Image.fromarray` for its inference when None.
    **kwargs: Additional parameters for `resize`.

  >>> resize_array(np.full((3, 5), 7.0, np.float32), (2, 2)).tolist()
  [[7.0, 7.0], [7.0, 7.0]]
  """
  height, width = shape
  with Image.fromarray(array, mode) as src, Image.new(src.mode, width, height) as dst:
    return resize(dst, src, filter, **kwargs).pixels


# For Emacs:
# Local Variables:
# fill-column: 100
# End:
