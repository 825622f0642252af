# %% [markdown]
# # pixresample: Example usage

# %%
# !pip install -q matplotlib pixresample

# %%
"""Simple examples of `pixresample` usage."""

import threading

import matplotlib.pyplot as plt
import numpy as np

import pixresample

# %% [markdown]
# ### Downsample (minify) an image

# %%
yx = (np.moveaxis(np.indices((96, 192)), 0, -1) + (0.5, 0.5)) / 96
radius = np.linalg.norm(yx - (0.75, 0.5), axis=-1)
array = (np.cos((radius + 0.1) ** 0.5 * 70.0) * 127.5 + 127.5).astype(np.uint8)
_, axs = plt.subplots(1, 1 + len(pixresample.FILTERS), figsize=(15, 2))
axs[0].set(title='original 96x192')
axs[0].imshow(array, cmap='gray', vmin=0, vmax=255)
for ax, filter in zip(axs[1:], pixresample.FILTERS):
  downsampled = pixresample.resize_array(array, (24, 48), filter=filter)
  ax.set(title=f"filter='{filter}'")
  ax.imshow(downsampled, cmap='gray', vmin=0, vmax=255)

# %% [markdown]
# ### Upsample (magnify) an RGB image

# %%
array = np.random.default_rng(1).integers(0, 256, (4, 6, 3), np.uint8)
src = pixresample.Image.fromarray(array)
dst = pixresample.Image.new('RGB', 192, 128)
pixresample.resize(dst, src, 'bicubic')
_, axs = plt.subplots(1, 2, figsize=(7, 2))
axs[0].imshow(src.pixels)
axs[1].imshow(dst.pixels)

# %% [markdown]
# ### Resample a 1D row with each filter

# %%
row = np.array([[3.0, 5.0, 8.0, 7.0]], np.float32)  # 4 source samples in a single-row image.
src = pixresample.Image.fromarray(row)
_, ax = plt.subplots(figsize=(7, 2))
ax.plot((np.arange(4) + 0.5) / 4, row[0], 'o', label='source')
for filter in pixresample.FILTERS:
  dst = pixresample.resample_axis(pixresample.Image.new('F', 32, 1), src, filter)
  ax.plot((np.arange(32) + 0.5) / 32, dst.pixels[0], '.', label=filter)
ax.legend()

# %% [markdown]
# ### Inspect the coefficients of one axis

# %%
plan = pixresample.plan_axis(8, 3, 'antialias')
print(plan.xmin, plan.xmax)
print(np.round(plan.weights.toarray() * plan.norm[:, None], 3))

# %% [markdown]
# ### Integer images and concurrent access

# %%
counts = pixresample.Image.fromarray(np.array([[0, 10, 0, 10]], np.int32))
lock = threading.Lock()  # Held while each pass computes and writes pixels.
for integer_rounding in pixresample.INTEGER_ROUNDINGS:
  dst = pixresample.Image.new('I', 2, 1)
  pixresample.resample_axis(dst, counts, 'bilinear', lock=lock, integer_rounding=integer_rounding)
  print(integer_rounding, dst.pixels[0])
