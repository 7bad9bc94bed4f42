from __future__ import annotations

import warnings

import numpy as np
import numpy.typing as npt


# ======================================================================


class FormatStyle:
    """
    `FormatStyle` defines a base class for discrete formatting
    operations that can be applied to a string. The style may optionally
    incoporate features of a linked parent style.

    Derived classes provide their own implementation of the `apply(s)`
    method to accomplish the formatting.

    Parameters
    ----------
    parent : FormatStyle, Optional
        The parent style, if any.
    """

    def __init__(self, parent: FormatStyle = None):
        self.parent = parent

    # -- Public Methods ------------------------------------------------

    def apply(self, s: str) -> str:
        """
        Format or modify `s`, as well as applying any formatting from
        parent styles if desired.  At the base level this returns `s`
        unchanged.
        """
        return s

    @property
    def level(self) -> int:
        """
        Returns the level of this `FormatStyle` object in the tree
        of styles.  The top (root) style has a level of 1.
        """
        if self.parent:
            return self.parent.level + 1
        else:
            return 1


# ----------------------------------------------------------------------

class PrintStyles:
    """
    `PrintStyles` holds a collection of named `FormatStyle` objects
    linked as parent / child.  Solvers use these to print progress at
    different levels of detail.

    Parameters
    ----------
    display_level : int, default = 10
        Lowest number style level to display.  The highest level is
        **1**. Setting ``display_level=0`` will suppress output.

    Examples
    --------
    A root style and an indented child style give the usual layout of
    solver progress output:

    >>> fmt = PrintStyles(display_level=2)
    >>> fmt.add('solver', AddTabStyle())  # Level 1.
    >>> fmt.add('iteration', AddDotStyle(), parent='solver')  # Level 2.
    >>> fmt.print('solver', "Wegstein's Method:")
    Wegstein's Method:
    >>> fmt.apply('iteration', "Iteration 1: x = 2.0")
    '... Iteration 1: x = 2.0'

    Lowering `display_level` hides the deeper styles:

    >>> fmt.display_level = 1
    >>> fmt.print('iteration', "Iteration 2: x = 1.5")
    >>> fmt.print('solver', "Done.")
    Done.
    """

    def __init__(self, display_level: int = 10):
        self.display_level = display_level
        self._styles: dict[str, FormatStyle] = {}  # Flat file.

    # -- Public Methods ------------------------------------------------

    def add(self, name: str, style: FormatStyle, parent: str = None):
        """
        Adds a new style to the collection of formatting styles.

        Parameters
        ----------
        name : str
            Name of added style.
        style : FormatStyle
            Style object.
        parent : str, Optional
            Name of parent style (to insert below).

            .. note::If the object `style` holds an existing reference
               to a parent `FormatStyle` this will be overwritten.

        Raises
        ------
        ValueError
            If `name` already exists or `parent` does not exist.
        """
        if name in self._styles:
            raise ValueError(f"Print style '{name}' already defined.")

        if parent:
            try:
                style.parent = self._styles[parent]
            except KeyError:
                raise ValueError(f"Parent print style '{parent}' not found.")
        else:
            style.parent = None

        self._styles[name] = style

    def apply(self, name: str, s: str) -> str:
        """
        Apply format style `name` to string `s`, including any parent
        styles (where applicable).

        Raises
        ------
        ValueError
            If `name` is not found.
        """
        try:
            style = self._styles[name]
        except KeyError:
            raise ValueError(f"Style '{name}' not found.")

        return style.apply(s)

    def print(self, name: str | None, s: str = '', *args,
              display_level: int = None, **kwargs):
        """
        Print string `s` after applying formatting, if style `name` is
        at or above the `display_level`.

        Parameters
        ----------
        name : str
            Name of format style to apply, or `None` to bypass
            formatting.

            .. note::If `name` is not found, a warning is generated
               and `s` is printed without formatting.

        s : str, default = ''
            String to format.

        display_level : int
            If supplied, sets the `display_level` parameter for this
            print operation only.

        *args, **kwargs :
            Remaining positional and keyword arguments passed directly
            to `print` after `s`.
        """
        if name is None:
            print(s, *args, **kwargs)
            return

        try:
            style = self._styles[name]
        except KeyError:
            print(s, *args, **kwargs)
            warnings.warn(f"Format style '{name}' not found.")
            return

        if display_level is None:
            display_level = self.display_level

        if style.level <= display_level:
            print(style.apply(s), *args, **kwargs)


# ----------------------------------------------------------------------

class PrintStylesMixin:
    """
    Mixin class that adds a `PrintStyles` object and methods to a
    class.

    .. note::This mixin should appear first (leftmost) in the list of
       parent classes.

    Parameters
    ----------
    display_level : int, default = 0
        Lowest number style level to display.  The highest level is
        **1**. Setting ``display_level=0`` will suppress output.
    """

    def __init__(self, *args, display_level: int = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.__pstyles = PrintStyles(display_level=display_level)

    # -- Public Methods ------------------------------------------------

    @property
    def display_level(self) -> int:
        return self.__pstyles.display_level

    @display_level.setter
    def display_level(self, level: int):
        self.__pstyles.display_level = level

    @property
    def pstyles(self) -> PrintStyles:
        return self.__pstyles


# ======================================================================

# Standard format styles.

class AddTabStyle(FormatStyle):
    """
    If the style has a parent, prepends four spaces to the string
    before applying the parent style.
    """

    def apply(self, s: str) -> str:
        if self.parent:
            return self.parent.apply('    ' + s)
        else:
            return s


class AddDotStyle(FormatStyle):
    """
    If the style has a parent, prepends three dots and a space
    (``... ``) to the string before applying the parent style.
    """

    def apply(self, s: str) -> str:
        if self.parent:
            return self.parent.apply('... ' + s)
        else:
            return s


# ======================================================================

def arr2str(x: npt.ArrayLike, *, precision: int = 6) -> str:
    """
    Fixed precision string conversion for iterates.  Scalars and
    single-element arrays are shown without brackets.

    Examples
    --------
    >>> arr2str([1.0, -0.25])
    '[ 1.000000, -0.250000]'
    >>> arr2str(2.0)
    ' 2.000000'
    """
    x = np.asarray(x)
    if x.size == 1:
        return val2str(x.item(0), dp=precision)

    return np.array2string(x, precision=precision, suppress_small=True,
                           separator=', ', sign=' ', floatmode='fixed')


def val2str(x: float, *, dp: int = 6, signed: bool = True) -> str:
    """
    Fixed precision string conversion for a single value, leaving a
    space for the sign of positive values when ``signed=True``.
    """
    sgn = ' ' if signed else ''
    return f"{x:{sgn}.0{dp}f}"
