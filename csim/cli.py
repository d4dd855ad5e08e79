"""Command line front end.

    csim [-hv] -s <num> -E <num> -b <num> -t <file>

Prints ``hits:<H> misses:<M> evictions:<E>`` and writes the same three
numbers to the results file.
"""
import logging

import click

from csim.core.address import ConfigurationError
from csim.core.simulator import describe_step
from csim.core.trace import TraceSourceError
from csim.data.stats_export import RESULTS_FILE, Exporter, export_chart_json, export_chart_pdf, format_summary
from csim.simulation import Simulation, SimulationConfig

EPILOG = """\b
Examples:
  linux>  csim -s 4 -E 1 -b 4 -t traces/yi.trace
  linux>  csim -v -s 8 -E 2 -b 4 -t traces/yi.trace
"""


@click.command(context_settings={'help_option_names': ['-h', '--help']}, epilog=EPILOG)
@click.option('-v', 'verbose', is_flag=True, help='Optional verbose flag.')
@click.option('-s', 'set_bits', type=int, help='Number of set index bits.')
@click.option('-E', 'associativity', type=int, help='Number of lines per set.')
@click.option('-b', 'block_bits', type=int, help='Number of block offset bits.')
@click.option('-t', 'trace_file', type=str, help='Trace file.')
@click.option('--results-file', default=RESULTS_FILE, show_default=True,
              help='Where to write "<hits> <misses> <evictions>".')
@click.option('--csv', 'csv_path', type=click.Path(dir_okay=False), help='Also export the statistics as CSV.')
@click.option('--json', 'json_path', type=click.Path(dir_okay=False), help='Also export the statistics as JSON.')
@click.option('--chart', 'chart_path', type=click.Path(dir_okay=False), help='Also save a PDF bar chart.')
@click.option('--debug', is_flag=True, help='Log debug messages to stderr.')
@click.pass_context
def main(ctx, verbose, set_bits, associativity, block_bits, trace_file,
         results_file, csv_path, json_path, chart_path, debug):
    """Replay a Valgrind memory trace against an LRU set-associative cache."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    config = SimulationConfig(set_bits=set_bits, associativity=associativity, block_bits=block_bits,
                              trace_file=trace_file, verbose=verbose, results_file=results_file)
    try:
        sim = Simulation(config)
    except ConfigurationError as e:
        if e.missing:
            click.echo(f"{ctx.info_name}: Missing required command line argument")
        else:
            click.echo(f"{ctx.info_name}: {e}")
        click.echo(ctx.get_help())
        ctx.exit(1)

    callback = (lambda info: click.echo(describe_step(info))) if config.verbose else None
    try:
        stats = sim.run(callback)
    except TraceSourceError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

    click.echo(format_summary(stats))
    if config.results_file:
        Exporter.write_results(stats, config.results_file)
    if csv_path:
        Exporter.export_stats_csv(csv_path, stats)
    if json_path:
        export_chart_json(stats, json_path)
    if chart_path:
        export_chart_pdf(stats, chart_path, title=sim.geometry.describe())


if __name__ == '__main__':
    main()
