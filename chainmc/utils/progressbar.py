"""Boilerplate code for a tqdm progress bar, or no bar if not requested."""

import tqdm


def progress_bar(display, total, description):
    """Get a tqdm progress bar interface.

    Args:
        display (bool):
            if true, a real progress bar will be returned.
        total (int):
            the total size of the progress bar.
        description (str):
            description to print in progress bar.
    """
    if display:
        return tqdm.tqdm(total=total, desc=description)
    return _EmptyBar()


class _EmptyBar:
    """A dummy progress bar that does nothing.

    Idea take from emce:
    https://github.com/dfm/emcee/blob/main/src/emcee/pbar.py
    """

    # pylint: disable=missing-function-docstring

    def __enter__(self, *args, **kwargs):
        return self

    def __exit__(self, *args, **kwargs):
        pass

    def update(self, *args):
        pass

    def close(self):
        pass
