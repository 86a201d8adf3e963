"""
Report module - Sentences and tables printed for a run.

Sentences use rich console markup; tables are built as pandas DataFrames and
turned into borderless rich tables for printing.
"""

import pandas as pd
from rich.markup import escape
from rich.table import Table

from .constants import DEFAULT_LENGTH_PRECISION, DEFAULT_RATIO_PRECISION, DEFAULT_SECONDS_PRECISION
from .formatting import format_duration, format_length, format_ratio, format_speed
from .quantity import KILOMETER, KILOMETER_PER_HOUR, MILE, MILE_PER_HOUR
from .run import average_pace, average_speed, projected_time, speed_ratio

PROJECTION_TITLE = "This is how long you would have needed for other distances:"
COMPARISON_TITLE = "Your average velocity compared to those of other performances:"


def display_units(use_miles=False):
    """
    Get the units used for output.

    Returns:
        Tuple of (length unit, speed unit)
    """
    if use_miles:
        return MILE, MILE_PER_HOUR
    return KILOMETER, KILOMETER_PER_HOUR


def summary_lines(run, use_miles=False, precision=DEFAULT_SECONDS_PRECISION,
                  length_precision=DEFAULT_LENGTH_PRECISION):
    """
    Build the summary sentences for a run.

    Args:
        run: The Run to describe
        use_miles: Use miles and mph instead of kilometers and km/h
        precision: Number of decimals shown for seconds
        length_precision: Number of decimals shown for lengths and speeds

    Returns:
        List of strings with rich markup
    """
    length_unit, speed_unit = display_units(use_miles)

    distance = format_length(run.distance, length_unit, length_precision)
    time = format_duration(run.time, precision)
    speed = format_speed(average_speed(run), speed_unit, length_precision)
    pace = format_duration(average_pace(run, length_unit), precision)

    return [
        f"Today, you ran [bold]{distance}[/bold] in [bold]{time}[/bold].",
        f"[bold]Your average velocity was {speed}.[/bold]",
        f"Your average pace was [bold]{pace}[/bold] per {length_unit.name}.",
    ]


def projection_table(run, distances, precision=DEFAULT_SECONDS_PRECISION):
    """
    Build the table of projected times for other distances.

    Args:
        run: The Run to project
        distances: Iterable of NamedLength
        precision: Number of decimals shown for seconds

    Returns:
        DataFrame with the columns 'distance' and 'time'
    """
    rows = [
        {
            'distance': named.name,
            'time': format_duration(projected_time(run, named.distance), precision),
        }
        for named in distances
    ]
    return pd.DataFrame(rows, columns=['distance', 'time'])


def comparison_table(run, speeds, precision=DEFAULT_RATIO_PRECISION):
    """
    Build the table comparing the run's average speed with other performances.

    Args:
        run: The Run to compare
        speeds: Iterable of NamedSpeed
        precision: Number of decimals shown for the ratios

    Returns:
        DataFrame with the columns 'ratio' and 'performance'
    """
    speed = average_speed(run)
    rows = [
        {
            'ratio': format_ratio(speed_ratio(speed, named.speed), precision),
            'performance': named.name,
        }
        for named in speeds
    ]
    return pd.DataFrame(rows, columns=['ratio', 'performance'])


def render_table(df):
    """
    Turn a DataFrame into a borderless rich table without header.

    The first column is right aligned, the others left aligned.
    """
    table = Table(box=None, show_header=False, pad_edge=False)
    for i, _ in enumerate(df.columns):
        table.add_column(justify='right' if i == 0 else 'left')
    for row in df.itertuples(index=False):
        table.add_row(*(escape(str(value)) for value in row))
    return table
