#!/usr/bin/env python3
"""Create HTML documentation from the source code using `pdoc`."""
# Note: Invoke this from the parent directory as "python3 pdoc_files/make.py".

import pathlib
import re

import pdoc

MODULE_NAME = 'pixresample'
OUTPUT_DIRECTORY = pathlib.Path('./pdoc_files/html')
APPLY_POSTPROCESS = True


def main() -> None:
  """Invoke `pdoc` on the package source files."""
  pdoc.render.configure(
      docformat='google',
      edit_url_map=None,
      math=True,
      search=True,
      show_source=True,
  )

  pdoc.pdoc(
      f'./{MODULE_NAME}',
      output_directory=OUTPUT_DIRECTORY,
  )

  if APPLY_POSTPROCESS:
    output_file = OUTPUT_DIRECTORY / f'{MODULE_NAME}.html'
    text = output_file.read_text()

    # contextlib.AbstractContextManager -> AbstractContextManager, typing.Any -> Any.
    for module in ['contextlib', 'typing']:
      text = text.replace(f'<span class="n">{module}</span><span class="o">.</span>', '')

    # The private aliases "_NDArray" and "_ArrayLike" are numpy types.
    for src, dst in [('NDArray', 'np.ndarray'), ('ArrayLike', 'ArrayLike'), ('DType', 'np.dtype')]:
      text = re.sub(
          rf'(?s)<span class="o">~</span>\s*<span class="n">_{src}<',
          rf'<span class="n">{dst}<',
          text,
      )
      text = text.replace(f'~_{src}', dst)

    # pixresample.Image, pixresample.Filter, etc. -> Image, Filter, etc.
    text = re.sub(r'pixresample\.([A-Z][A-Za-z]+)', r'\1', text)

    output_file.write_text(text)


if __name__ == '__main__':
  main()
