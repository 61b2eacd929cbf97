# main.py
import argparse

from runners.run_xor import main as xor


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["xor"])
    return p.parse_known_args()


def main():
    args, rest = parse_args()
    if args.mode == "xor":
        xor(rest)


if __name__ == "__main__":
    main()
