"""
Unit Registry for Linear Distance Conversion.

This module provides a centralized unit system using the `pint` library.
Distances handed to the geodesic builders are always in meters; callers
that work in other linear units (nautical miles, kilometers) convert
through this registry so the conversion factors live in one place.

Example Usage
-------------
>>> from common.units import to_meters
>>> to_meters(10, 'NM')
18520.0
"""

from typing import Optional, Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


# Linear unit codes accepted by the calling layer, mapped to pint names
LINEAR_UNIT_ALIASES = {
    "NM": "nautical_mile",
    "NMI": "nautical_mile",
    "KM": "kilometer",
    "M": "meter",
}


class UnitRegistry:
    """Wrapper around pint UnitRegistry with linear unit code lookup.

    Attributes
    ----------
    registry : pint.UnitRegistry
        The underlying pint unit registry.

    Examples
    --------
    >>> units = UnitRegistry()
    >>> units.quantity(2, 'NM').to('m')
    <Quantity(3704.0, 'meter')>
    """

    def __init__(self):
        self._registry = ureg

    @property
    def registry(self) -> PintUnitRegistry:
        """Access the underlying pint registry."""
        return self._registry

    def quantity(self, value: float, unit: str) -> pint.Quantity:
        """Create a quantity with units.

        Parameters
        ----------
        value : float
            The numerical value.
        unit : str
            A linear unit code ('NM', 'KM', 'M') or any pint unit string.

        Returns
        -------
        pint.Quantity
            A quantity object with associated units.
        """
        return self._registry.Quantity(value, resolve_linear_unit(unit) or unit)

    def validate_dimensionality(
        self,
        quantity: pint.Quantity,
        expected_dim: str
    ) -> bool:
        """Check if a quantity has the expected dimensionality.

        Parameters
        ----------
        quantity : pint.Quantity
            The quantity to check.
        expected_dim : str
            The expected dimensionality (e.g., '[length]').

        Returns
        -------
        bool
            True if dimensionality matches.

        Raises
        ------
        pint.DimensionalityError
            If dimensionality does not match.
        """
        expected = self._registry.get_dimensionality(expected_dim)
        if quantity.dimensionality != expected:
            raise pint.DimensionalityError(
                quantity.units,
                expected,
                quantity.dimensionality,
                expected
            )
        return True


def resolve_linear_unit(code: Optional[str]) -> Optional[str]:
    """Map a case-insensitive linear unit code to a pint unit name.

    ``None`` means meters. Returns None when the code is not recognised.
    """
    if code is None:
        return "meter"
    return LINEAR_UNIT_ALIASES.get(code.strip().upper())


_units = UnitRegistry()


def to_meters(value: Union[float, pint.Quantity], unit: Optional[str] = None) -> float:
    """Convert a linear distance to meters.

    Parameters
    ----------
    value : float or pint.Quantity
        The distance. A Quantity carries its own unit and ``unit`` is ignored.
    unit : str, optional
        Unit code ('NM', 'KM', 'M', case-insensitive) or a pint unit name.
        Defaults to meters.

    Returns
    -------
    float
        The distance in meters.

    Raises
    ------
    ValueError
        If the unit is not a length.
    """
    if isinstance(value, pint.Quantity):
        quantity = value
    else:
        quantity = _units.quantity(value, unit if unit is not None else "M")

    try:
        _units.validate_dimensionality(quantity, "[length]")
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Distance has incompatible units. Expected a length, got {quantity.units}"
        ) from e
    return float(quantity.to("meter").magnitude)
