from rich.console import Console

from runcalc.reference import load_reference
from runcalc.report import (
    comparison_table,
    display_units,
    projection_table,
    render_table,
    summary_lines,
)
from runcalc.quantity import KILOMETER, MILE, MILE_PER_HOUR
from runcalc.run import parse_run


def render(renderable):
    console = Console(color_system=None, width=120)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def test_display_units():
    assert display_units()[0] == KILOMETER
    assert display_units(use_miles=True) == (MILE, MILE_PER_HOUR)


def test_summary_lines_metric():
    lines = summary_lines(parse_run('10km', '50min'))
    assert lines == [
        'Today, you ran [bold]10.000 km[/bold] in [bold]50 min 0 s[/bold].',
        '[bold]Your average velocity was 12.000 km/h.[/bold]',
        'Your average pace was [bold]5 min 0 s[/bold] per kilometer.',
    ]


def test_summary_lines_imperial():
    lines = summary_lines(parse_run('1mi', '8min'), use_miles=True, precision=1)
    assert '[bold]1.000 mi[/bold]' in lines[0]
    assert lines[1] == '[bold]Your average velocity was 7.500 mph.[/bold]'
    assert lines[2].endswith('[bold]8 min 0.0 s[/bold] per mile.')


def test_projection_table():
    run = parse_run('10km', '50min')
    df = projection_table(run, load_reference().distances())
    assert list(df.columns) == ['distance', 'time']
    assert df.loc[df['distance'] == '5 km', 'time'].iloc[0] == '25 min 0 s'
    assert df.loc[df['distance'] == 'half marathon', 'time'].iloc[0] == '1 h 45 min 29 s'


def test_comparison_table():
    run = parse_run('42.195km', '2h 30min')
    df = comparison_table(run, load_reference().speeds)
    assert list(df.columns) == ['ratio', 'performance']
    assert len(df) == 6
    assert df['ratio'].iloc[0] == '3.279 times'


def test_render_table():
    run = parse_run('10km', '50min')
    output = render(render_table(projection_table(run, load_reference().distances())))
    lines = output.splitlines()
    assert len(lines) == 6
    assert lines[0].rstrip().endswith('30 s')
    assert '100 m' in lines[0]
    assert '┃' not in output and '│' not in output


def test_comparison_table_precision():
    run = parse_run('42.195km', '2h 30min')
    df = comparison_table(run, load_reference().speeds, precision=1)
    assert df['ratio'].iloc[0] == '3.3 times'
