#!/usr/bin/env python3
import argparse, csv, logging, os
from ellermaze.mapgen.generator import generate_maze

# (width, height, seed, closed) -> fixture consumed by tests/test_golden_mazes.py
GOLDEN_CASES = [
    (2, 2, "fixed-seed", True),
    (5, 4, "fixed-seed", True),
    (6, 5, "golden-open", False),
    (8, 8, 12345, True),
]

def golden_name(width, height, seed, closed):
    return f"{seed}_{width}x{height}{'' if closed else '_open'}.tsv"

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t', lineterminator='\n')
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    maze = generate_maze(args.width, args.height, closed=not args.open, seed=args.seed)
    write_tsv(maze.wall_masks(), args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for width, height, seed, closed in GOLDEN_CASES:
        maze = generate_maze(width, height, closed=closed, seed=seed)
        write_tsv(maze.wall_masks(), os.path.join(args.outdir, golden_name(width, height, seed, closed)))
    print(f"Wrote golden pack to {args.outdir}")

def main():
    p = argparse.ArgumentParser(description="Dump maze wall masks (1=top 2=right 4=bottom 8=left) as TSV.")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--width', type=int, required=True)
    p1.add_argument('--height', type=int, default=None)
    p1.add_argument('--seed', type=str, default=None)
    p1.add_argument('--open', action='store_true', help="start with the outer rim open")
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--outdir', type=str, default=os.path.join("data", "golden_mazes"))
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
