"""
CLI to compare graph storage strategies across experiments and seeds.

Reads experiments/experiments.yml, builds each experiment's graph (random or
from a graph file), copies it into every configured storage strategy, runs
Dijkstra on each copy and records timings plus a cross-storage consistency
check.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple
import csv
from concurrent.futures import ProcessPoolExecutor, as_completed
import sys
import time

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import dijkstra
from graph import NO_EDGE, Graph
from graph_generator import build_random_graph, vertex_label
from graph_importer import import_graph
from storage import GraphStorage, copy_graph, resolve_storage


RUN_FIELDS = [
    "experiment",
    "storage",
    "seed",
    "vertices",
    "edges",
    "source",
    "reachable",
    "max_distance",
    "build_sec",
    "solve_sec",
    "consistent",
]

AGGREGATE_FIELDS = [
    "experiment",
    "storage",
    "runs",
    "vertices",
    "avg_reachable",
    "avg_build_sec",
    "avg_solve_sec",
    "consistent",
]


@dataclass(frozen=True)
class ExperimentConfig:
    name: str
    vertices: int = 0
    out_degree: int = 0
    max_weight: int = 0
    graph_file: Optional[str] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    storages: Sequence[str]
    experiments: Sequence[ExperimentConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    for key in ("seed", "seed_count", "experiments"):
        if key not in data:
            raise ValueError(f"{path}: missing required key '{key}'")

    requested = data.get("storages")
    if requested is None:
        requested = [s.value for s in GraphStorage]
    storages = [resolve_storage(s).value for s in requested]
    if not storages:
        raise ValueError(f"{path}: at least one storage strategy is required")

    experiments: List[ExperimentConfig] = []
    for exp in data["experiments"]:
        if "name" not in exp:
            raise ValueError(f"{path}: every experiment needs a name")
        graph_file = exp.get("graph_file")
        if graph_file is None and "vertices" not in exp:
            raise ValueError(f"{path}: experiment '{exp['name']}' needs either vertices or graph_file")
        experiments.append(
            ExperimentConfig(
                name=exp["name"],
                vertices=int(exp.get("vertices", 0)),
                out_degree=int(exp.get("out_degree", 0)),
                max_weight=int(exp.get("max_weight", 0)),
                # Relative graph files are resolved against the config's directory.
                graph_file=str(path.parent / graph_file) if graph_file is not None else None,
                source=str(exp["source"]) if exp.get("source") is not None else None,
            )
        )
    return Config(
        seed=int(data["seed"]),
        seed_count=int(data["seed_count"]),
        storages=storages,
        experiments=experiments,
    )


def run_experiments(
    config_path: Path,
    runs_csv: Path | None = None,
    aggregates_csv: Path | None = None,
    max_workers: int | None = None,
    use_processes: bool = True,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    existing_runs = load_runs_csv(runs_csv) if runs_csv else []
    seen_keys: Set[Tuple[str, str, int]] = {
        (str(r.get("experiment")), str(r.get("storage")), int(r.get("seed"))) for r in existing_runs
    }

    # One task per (experiment, seed), listing the storages still missing for it.
    tasks: List[tuple[ExperimentConfig, int, List[str]]] = []
    for exp in cfg.experiments:
        for offset in range(cfg.seed_count):
            seed = cfg.seed + offset
            pending = [s for s in cfg.storages if (exp.name, s, seed) not in seen_keys]
            if pending:
                tasks.append((exp, seed, pending))

    print(f"[run] queued {len(tasks)} new tasks (existing runs: {len(existing_runs)})")

    new_results: List[Dict[str, object]] = []
    done: Set[Tuple[str, int]] = set()
    if tasks:
        if use_processes:
            try:
                with ProcessPoolExecutor(max_workers=max_workers) as executor:
                    future_to_task = {
                        executor.submit(_run_task, asdict(exp), list(cfg.storages), seed, pending): (exp.name, seed)
                        for exp, seed, pending in tasks
                    }
                    for future in as_completed(future_to_task):
                        exp_name, seed = future_to_task[future]
                        try:
                            rows = future.result()
                        except Exception as exc:
                            print(f"[run] failed experiment={exp_name} seed={seed}: {exc}")
                            continue
                        _record(rows, new_results, runs_csv)
                        done.add((exp_name, seed))
            except (PermissionError, NotImplementedError, OSError) as exc:
                print(f"[run] process pool unavailable ({exc}), falling back to sequential execution")
                use_processes = False
        else:
            print("[run] using sequential execution")

        if not use_processes:
            for exp, seed, pending in tasks:
                if (exp.name, seed) in done:
                    continue
                rows = _run_task(asdict(exp), list(cfg.storages), seed, pending)
                _record(rows, new_results, runs_csv)
                done.add((exp.name, seed))

    results = existing_runs + new_results

    if aggregates_csv:
        write_aggregates_csv(aggregate_by_storage(results), aggregates_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} total runs in {elapsed:.2f}s")
    return results


def _record(rows: List[Dict[str, object]], results: List[Dict[str, object]], runs_csv: Path | None) -> None:
    for row in rows:
        results.append(row)
        if runs_csv:
            append_run_row(runs_csv, row)
        print(
            f"[run] completed experiment={row['experiment']} storage={row['storage']} seed={row['seed']} "
            f"build={row['build_sec']:.4f}s solve={row['solve_sec']:.4f}s"
        )
        if not row["consistent"]:
            print(f"[run] WARNING storage={row['storage']} disagrees with the reference storage")


def _run_task(
    exp_dict: Dict[str, object],
    storages: Sequence[str],
    seed: int,
    pending: Sequence[str],
) -> List[Dict[str, object]]:
    """
    Run every configured storage and keep the rows of the pending ones.

    All storages run so the consistency check always compares against the
    first configured storage, even when only a newly added one is pending.
    """
    exp = ExperimentConfig(**exp_dict)  # type: ignore[arg-type]
    base, source = _build_base_graph(exp, seed)
    rows = _compare_storages(exp, base, source, storages, seed)
    return [row for row in rows if row["storage"] in pending]


def _build_base_graph(exp: ExperimentConfig, seed: int) -> tuple[Graph, str]:
    if exp.graph_file is not None:
        graph: Graph = AdjacencyListGraph()
        query = import_graph(exp.graph_file, graph)
        source = exp.source or (query.source if query else None)
        if source is None:
            source = min(graph.vertices(), default=vertex_label(0))
        return graph, source

    graph = build_random_graph(exp.vertices, exp.out_degree, exp.max_weight, seed=seed)
    return graph, exp.source or vertex_label(0)


def _compare_storages(
    exp: ExperimentConfig,
    base: Graph,
    source: str,
    storages: Sequence[str],
    seed: int,
) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    reference: tuple[str, Dict[str, int]] | None = None
    edge_count = sum(1 for _ in base.edges())

    for storage in storages:
        t0 = time.perf_counter()
        graph = copy_graph(base, storage)
        t1 = time.perf_counter()
        dist: Dict[str, int] = {}
        pred: Dict[str, Optional[str]] = {}
        dijkstra(graph, source, dist, pred)
        t2 = time.perf_counter()

        observed = (str(graph), dist)
        if reference is None:
            reference = observed
        reachable = [d for d in dist.values() if d != NO_EDGE]
        rows.append(
            {
                "experiment": exp.name,
                "storage": storage,
                "seed": seed,
                "vertices": len(graph),
                "edges": edge_count,
                "source": source,
                "reachable": len(reachable),
                "max_distance": max(reachable, default=0),
                "build_sec": t1 - t0,
                "solve_sec": t2 - t1,
                "consistent": observed == reference,
            }
        )
    return rows


def aggregate_by_storage(results: Iterable[Dict[str, object]]) -> List[Dict[str, object]]:
    """
    Aggregate metrics per (experiment, storage), averaging only across seeds.
    """
    accum: Dict[tuple[str, str], Dict[str, float]] = {}
    counts: Dict[tuple[str, str], int] = {}
    meta: Dict[tuple[str, str], Dict[str, object]] = {}

    for res in results:
        key = (str(res["experiment"]), str(res["storage"]))
        counts[key] = counts.get(key, 0) + 1
        bucket = accum.setdefault(key, {"reachable_sum": 0.0, "build_sum": 0.0, "solve_sum": 0.0})
        bucket["reachable_sum"] += float(res.get("reachable", 0))
        bucket["build_sum"] += float(res.get("build_sec", 0.0))
        bucket["solve_sum"] += float(res.get("solve_sec", 0.0))

        info = meta.setdefault(key, {"vertices": int(res.get("vertices", 0)), "consistent": True})
        info["consistent"] = bool(info["consistent"]) and bool(res.get("consistent", True))

    aggregated_rows: List[Dict[str, object]] = []
    for key, sums in accum.items():
        n = counts[key]
        aggregated_rows.append(
            {
                "experiment": key[0],
                "storage": key[1],
                "runs": n,
                "vertices": meta[key]["vertices"],
                "avg_reachable": sums["reachable_sum"] / n,
                "avg_build_sec": sums["build_sum"] / n,
                "avg_solve_sec": sums["solve_sum"] / n,
                "consistent": meta[key]["consistent"],
            }
        )
    return aggregated_rows


def load_runs_csv(path: Path | None) -> List[Dict[str, object]]:
    if path is None or not path.exists():
        return []
    with path.open() as f:
        reader = csv.DictReader(f)
        rows: List[Dict[str, object]] = []
        for row in reader:
            parsed: Dict[str, object] = dict(row)
            # Normalize numeric fields so aggregation works on resumed runs.
            for key in ("seed", "vertices", "edges", "reachable", "max_distance"):
                if row.get(key):
                    parsed[key] = int(row[key])
            for key in ("build_sec", "solve_sec"):
                if row.get(key):
                    parsed[key] = float(row[key])
            parsed["consistent"] = row.get("consistent") == "True"
            rows.append(parsed)
        return rows


def append_run_row(path: Path, res: Mapping[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        if write_header:
            writer.writeheader()
        writer.writerow({k: res.get(k) for k in RUN_FIELDS})


def write_aggregates_csv(aggregated: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write aggregated metrics by storage to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=AGGREGATE_FIELDS)
        writer.writeheader()
        for row in aggregated:
            writer.writerow({k: row.get(k) for k in AGGREGATE_FIELDS})


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    default_config = Path(__file__).parent / "experiments" / "experiments.yml"
    config_path = Path(args[0]) if args else default_config
    out_dir = config_path.parent / "results"
    runs_csv = out_dir / "runs.csv"
    aggregates_csv = out_dir / "aggregates.csv"

    results = run_experiments(config_path, runs_csv=runs_csv, aggregates_csv=aggregates_csv)
    for row in aggregate_by_storage(results):
        print(row)
    print(f"Wrote runs to {runs_csv} and aggregates to {aggregates_csv}")


if __name__ == "__main__":
    main()
