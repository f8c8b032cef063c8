#!/usr/bin/env python3
"""
fs-gear Performance Benchmark

Two modes:
- tree: listing, search and statistics over a generated project (default)
- patterns: the wildcard matcher against fnmatch, including adversarial patterns
"""

import fnmatch
import os
import statistics
import sys
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================================
# FILE GENERATORS (Polyglot project simulation)
# ============================================================

@dataclass(frozen=True)
class FileKind:
    name: str
    extension: str
    ratio: float
    generator: Callable[[int, int], bytes]
    subdir: str


def _python_module(file_id: int, dir_idx: int) -> bytes:
    return f'"""Module {file_id} in {dir_idx}."""\n\nVALUE = {file_id}\n'.encode()


def _markdown_doc(file_id: int, dir_idx: int) -> bytes:
    return f"# Document {file_id}\n\n".encode() + b"Lorem ipsum.\n" * (file_id % 40)


def _json_config(file_id: int, dir_idx: int) -> bytes:
    return f'{{"service": "api-{dir_idx}", "version": "{file_id}.0"}}'.encode()


def _log_file(file_id: int, dir_idx: int) -> bytes:
    lines = [f"2024-01-01 12:00:{i:02d} INFO Processing request {file_id + i}" for i in range(20)]
    return ("\n".join(lines) + "\n").encode()


def _binary_blob(file_id: int, dir_idx: int) -> bytes:
    return os.urandom(512 + (file_id % 256) * 64)


def _no_extension(file_id: int, dir_idx: int) -> bytes:
    return b"all:\n\techo build\n"


POLYGLOT_PROFILE = [
    FileKind("module", ".py", 0.35, _python_module, "src"),
    FileKind("docs", ".md", 0.15, _markdown_doc, "docs"),
    FileKind("config", ".JSON", 0.10, _json_config, "config"),
    FileKind("logs", ".log", 0.20, _log_file, "logs"),
    FileKind("assets", ".bin", 0.10, _binary_blob, "assets"),
    FileKind("Makefile", "", 0.10, _no_extension, "build"),
]


def create_project(root: Path, num_files: int = 500, num_dirs: int = 30) -> dict:
    """Create a polyglot project structure."""
    print(f"Creating polyglot project ({num_files} files, {num_dirs} dirs)...")

    counts = [int(num_files * k.ratio) for k in POLYGLOT_PROFILE]
    remainder = num_files - sum(counts)
    for i in range(remainder):
        counts[i % len(counts)] += 1

    created = 0
    for kind, count in zip(POLYGLOT_PROFILE, counts):
        for i in range(count):
            dir_idx = (created + i) % num_dirs
            dir_path = root / kind.subdir / f"dir_{dir_idx:02d}" / f"nested_{dir_idx % 3}"
            dir_path.mkdir(parents=True, exist_ok=True)

            file_path = dir_path / f"{kind.name}_{i:03d}{kind.extension}"
            file_path.write_bytes(kind.generator(created, dir_idx))
            created += 1

    summary = ", ".join(f"{c}x{k.extension or '(none)'}" for k, c in zip(POLYGLOT_PROFILE, counts) if c)
    print(f"Created {created} files: {summary}")

    return {"counts": dict(zip([k.extension for k in POLYGLOT_PROFILE], counts))}


# ============================================================
# BENCHMARK UTILITIES
# ============================================================

def bench(name: str, func: Callable, iterations: int = 5, warmup: int = 1) -> dict:
    """Run a benchmark."""
    for _ in range(warmup):
        func()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        result = func()
        times.append((time.perf_counter() - start) * 1000)

    return {
        "name": name,
        "mean": statistics.mean(times),
        "median": statistics.median(times),
        "min": min(times),
        "max": max(times),
        "total": sum(times),
        "times": times,
        "result": len(result) if hasattr(result, "__len__") else result,
    }


# ============================================================
# TREE MODE
# ============================================================

def run_tree_benchmark(root: Path) -> dict:
    """Benchmark listing, search and statistics over the generated tree."""
    from fs_gear import FileUtils, FilterCriteria

    fu = FileUtils(str(root))
    results = {}

    print("\n" + "=" * 70)
    print("1. RECURSIVE LISTING")
    print("=" * 70)
    r = bench("list_with_filter", lambda: fu.list_with_filter(".", FilterCriteria(recursive=True)))
    r_walk = bench(
        "os.walk",
        lambda: [os.path.join(dp, n) for dp, dn, fn in os.walk(root) for n in dn + fn],
    )
    print(f"list_with_filter(): {r['mean']:>7.2f}ms  ({r['result']} entries)")
    print(f"os.walk():          {r_walk['mean']:>7.2f}ms  ({r_walk['result']} entries)")
    print(f"Overhead: {r['mean']/r_walk['mean']:.1f}x (one stat per entry)")
    results["list"] = {"fs": r, "std": r_walk}

    print("\n" + "=" * 70)
    print("2. SEARCH")
    print("=" * 70)
    searches = [
        ("find_by_extension(py)", lambda: fu.find_by_extension(".", "py", recursive=True)),
        ("find_by_extension(json)", lambda: fu.find_by_extension(".", "json", recursive=True)),
        ("find_by_name(*_00?.*)", lambda: fu.find_by_name(".", "*_00?.*", recursive=True)),
        ("find_by_name(makefile*)", lambda: fu.find_by_name(".", "makefile*", recursive=True)),
        ("find_by_size(>=4KB)", lambda: fu.find_by_size(".", min_size=4096, recursive=True)),
    ]
    for name, func in searches:
        r = bench(name, func)
        print(f"{name:<26} {r['mean']:>7.2f}ms  ({r['result']} matches)")
        results[name] = r

    print("\n" + "=" * 70)
    print("3. STATISTICS")
    print("=" * 70)
    r = bench("directory_statistics", lambda: [fu.directory_statistics(".")])
    stats = fu.directory_statistics(".")
    print(f"directory_statistics(): {r['mean']:>7.2f}ms")
    print(f"  files={stats.file_count} dirs={stats.directory_count} size={stats.formatted_size}")
    print(f"  largest={stats.largest_file_name} ({stats.formatted_largest_file_size})")
    print(f"  extensions={dict(sorted(stats.extensions.items()))}")
    results["stats"] = r

    return results


# ============================================================
# PATTERNS MODE
# ============================================================

def run_pattern_benchmark(num_names: int = 5000) -> dict:
    """Benchmark the wildcard matcher against fnmatch."""
    from fs_gear import matches_pattern

    print("\n" + "=" * 70)
    print(f"WILDCARD MATCHING ({num_names} names)")
    print("=" * 70)

    names = [f"module_{i:05d}.{('py', 'md', 'TXT', 'log')[i % 4]}" for i in range(num_names)]
    patterns = ["*", "module_00042.py", "*.txt", "module_0??1?.*", "*_*_*"]
    results = {}

    for pat in patterns:
        r = bench(pat, lambda p=pat: [n for n in names if matches_pattern(n, p)])
        r_std = bench("fnmatch", lambda p=pat: [n for n in names if fnmatch.fnmatch(n.lower(), p.lower())])
        print(f"{pat:<18} fs:{r['mean']:>7.2f}ms  fnmatch:{r_std['mean']:>7.2f}ms  ({r['result']} matches)")
        results[pat] = {"fs": r, "std": r_std}

    print("\nAdversarial patterns (no match possible):")
    for stars in (10, 50, 200):
        name = "a" * 500
        pat = "*a" * stars + "b"
        r = bench(f"adv{stars}", lambda p=pat: [matches_pattern(name, p)], iterations=3)
        print(f"  {stars:>3} stars vs 500 chars: {r['mean']:>8.2f}ms")
        results[f"adv{stars}"] = r

    return results


# ============================================================
# MAIN
# ============================================================

def main():
    import argparse

    parser = argparse.ArgumentParser(
        description="fs-gear Performance Benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python benchmark.py                    # Tree mode, 500 files
  python benchmark.py --files 2000       # Tree mode, 2000 files
  python benchmark.py --mode patterns    # Matcher only
  python benchmark.py --mode all         # Run both modes
"""
    )
    parser.add_argument("--files", type=int, default=500, help="Number of files (default: 500)")
    parser.add_argument("--dirs", type=int, default=30, help="Number of directories (default: 30)")
    parser.add_argument("--mode", choices=["tree", "patterns", "all"], default="tree",
                        help="Benchmark mode (default: tree)")
    parser.add_argument("--names", type=int, default=5000, help="Names for patterns mode (default: 5000)")
    args = parser.parse_args()

    print("=" * 70)
    print("fs-gear Performance Benchmark")
    print(f"Mode: {args.mode} | Files: {args.files} | Dirs: {args.dirs}")
    print("=" * 70)

    if args.mode in ("tree", "all"):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            create_project(root, args.files, args.dirs)
            run_tree_benchmark(root)

    if args.mode in ("patterns", "all"):
        run_pattern_benchmark(args.names)


if __name__ == "__main__":
    main()
