import argparse
import logging
import os

from examslots.config import get_active_config
from examslots.io_utils import load_time_ranges, report_file_name, save_schedule_csv, write_report
from examslots.models import parse_time
from examslots.report import collect_stats, render_report, render_schedule_sets, render_stats
from examslots.scheduling.evaluation import summary
from examslots.session import build_session, generate_time_ranges


def main(argv=None):
    config = get_active_config()
    p = argparse.ArgumentParser(description="ExamSlots – evening-aware exam slot assignment")
    # Input
    p.add_argument('input', nargs='?', default=config["default_input"],
                   help='File with one time range per line, e.g. 08:00AM-09:00AM')
    p.add_argument('--generate', type=int, default=None, help='Generate N random time ranges instead of reading a file')

    # Algo
    p.add_argument('--clustering', type=str, default='first_fit', help='first_fit | components')
    p.add_argument('--evening_cutoff', type=str, default=config["evening_cutoff"])
    p.add_argument('--seed', type=int, default=None)

    # Output
    p.add_argument('--out', type=str, default=None, help='Report file (default: timestamped schedule-*.dat)')
    p.add_argument('--out_csv', type=str, default=None)
    p.add_argument('--dump_sets', action='store_true', help='Print every schedule set before assignment output')
    p.add_argument('--no_stats', action='store_true')
    p.add_argument('--no_summary', action='store_true', help='Skip the overlap-graph evaluation summary')
    p.add_argument('--log_level', type=str, default='INFO')
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if parse_time(args.evening_cutoff) is None:
        raise SystemExit(f"Unparsable --evening_cutoff: {args.evening_cutoff}")
    if args.clustering not in ('first_fit', 'components'):
        raise SystemExit("Unknown --clustering. Use first_fit | components")
    config["evening_cutoff"] = args.evening_cutoff

    if args.generate is not None:
        time_ranges = generate_time_ranges(args.generate, seed=args.seed)
    elif os.path.exists(args.input):
        time_ranges = load_time_ranges(args.input)
    else:
        raise SystemExit(f"Input file not found: {args.input} (or use --generate N)")

    session = build_session(time_ranges, config=config, seed=args.seed, strategy=args.clustering)

    if args.dump_sets:
        print(render_schedule_sets(session))

    report = render_report(session)
    if not args.no_stats:
        report += render_stats(collect_stats(session))
    print(report)

    out_path = args.out or report_file_name()
    write_report(out_path, report)
    if args.out_csv:
        save_schedule_csv(args.out_csv, session)

    if not args.no_summary:
        print(summary(session))
    print(f"\n### The schedule has been written to the output file: {out_path}.\n")


if __name__ == '__main__':
    main()
