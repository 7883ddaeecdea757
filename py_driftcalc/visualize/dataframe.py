"""Trajectory table export to pandas DataFrame.

Integration:
    This module is used by the HitResult.dataframe() method.

Typical Usage:
    ```python
    from py_driftcalc import Calculator
    from py_driftcalc.visualize.dataframe import hit_result_as_dataframe

    hit_result = Calculator().fire(shot)
    df = hit_result_as_dataframe(hit_result)
    df.to_csv('drift_table.csv')
    ```

Dependencies:
    This module requires pandas as an optional dependency. Install via:
    pip install py_driftcalc[charts]
"""

# pylint: skip-file
# Standard library imports
import warnings

# Local imports
from py_driftcalc.trajectory_data import HitResult, TrajectorySample

# Handle optional pandas dependency
try:
    from pandas import DataFrame
except ImportError as error:
    warnings.warn("Install pandas to convert trajectory to pandas.DataFrame", UserWarning)
    raise error

__all__ = (
    'hit_result_as_dataframe',
)


def hit_result_as_dataframe(hit_result: HitResult, formatted: bool = False) -> DataFrame:
    """Convert HitResult rows to a pandas DataFrame.

    Args:
        hit_result: HitResult with the computed table.
        formatted: False for numeric columns; True for unit-suffixed strings.

    Returns:
        DataFrame with one column per TrajectorySample field.
    """
    col_names = list(TrajectorySample._fields)
    if formatted:
        trajectory = [p.formatted() for p in hit_result]
    else:
        trajectory = [tuple(p) for p in hit_result]
    return DataFrame(trajectory, columns=col_names)
