"""
Batch runner for shortest-path experiments.

Reads experiments/experiments.yml, builds each maze or random graph, runs the
indexed-heap Dijkstra engine on it, and writes per-run and per-experiment
metrics to CSV.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
import csv
import time

from dijkstra_engine import SimpleDijkstraEngine
from graph_builder import build_random_graph, random_endpoints
from maze_solver import MazeGraph, START, TARGET, find_position, terrain_cost


MAZE = "maze"
RANDOM_GRAPH = "random_graph"

RESULT_FIELDS = [
    "experiment",
    "kind",
    "seed",
    "vertices",
    "start",
    "dest",
    "reachable",
    "cost",
    "path_length",
    "edges_examined",
    "heap_pops",
    "heap_pushes",
    "relaxed",
    "duration_sec",
]


@dataclass(frozen=True)
class ExperimentConfig:
    name: str
    kind: str
    # maze experiments
    maze: Sequence[str] = ()
    terrain: Mapping[str, float] = field(default_factory=dict)
    default_cost: float = 1.0
    # random_graph experiments
    vertices: int = 0
    edge_probability: float = 0.0
    max_weight: float = 10.0


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    experiments: Sequence[ExperimentConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict) or not isinstance(data.get("experiments"), list):
        raise ValueError(f"Config {path} requires an 'experiments' list.")
    experiments = [_parse_experiment(exp, i) for i, exp in enumerate(data["experiments"])]
    return Config(
        seed=int(data.get("seed", 0)),
        seed_count=int(data.get("seed_count", 1)),
        experiments=experiments,
    )


def _parse_experiment(exp: Mapping[str, object], index: int) -> ExperimentConfig:
    if not isinstance(exp, dict) or "name" not in exp:
        raise ValueError(f"Experiment #{index} requires a 'name'.")
    name = str(exp["name"])
    if "kind" not in exp:
        raise ValueError(f"Experiment '{name}' requires a 'kind'.")
    kind = str(exp["kind"])
    if kind == MAZE:
        if not exp.get("maze"):
            raise ValueError(f"Maze experiment '{name}' requires 'maze' rows.")
        terrain = exp.get("terrain") or {}
        return ExperimentConfig(
            name=name,
            kind=kind,
            maze=[str(row) for row in exp["maze"]],  # type: ignore[union-attr]
            terrain={str(k): float(v) for k, v in terrain.items()},  # type: ignore[union-attr]
            default_cost=float(exp.get("default_cost", 1.0)),  # type: ignore[arg-type]
        )
    if kind == RANDOM_GRAPH:
        if "vertices" not in exp or "edge_probability" not in exp:
            raise ValueError(f"Random-graph experiment '{name}' requires 'vertices' and 'edge_probability'.")
        return ExperimentConfig(
            name=name,
            kind=kind,
            vertices=int(exp["vertices"]),  # type: ignore[arg-type]
            edge_probability=float(exp["edge_probability"]),  # type: ignore[arg-type]
            max_weight=float(exp.get("max_weight", 10.0)),  # type: ignore[arg-type]
        )
    raise ValueError(f"Unknown experiment kind '{kind}' for '{name}'.")


def run_experiments(config_path: Path, runs_csv: Optional[Path] = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    tasks: List[tuple[ExperimentConfig, int]] = []
    for exp in cfg.experiments:
        if exp.kind == MAZE:
            # Mazes are deterministic; one run is enough.
            tasks.append((exp, cfg.seed))
            continue
        for offset in range(cfg.seed_count):
            tasks.append((exp, cfg.seed + offset))

    print(f"[run] queued {len(tasks)} tasks")

    results: List[Dict[str, object]] = []
    for exp, seed in tasks:
        try:
            res = run_single(exp, seed)
        except ValueError as exc:
            print(f"[run] failed experiment={exp.name} seed={seed}: {exc}")
            continue
        results.append(res)
        print(
            f"[run] completed experiment={exp.name} seed={seed} "
            f"reachable={res['reachable']} duration={res['duration_sec']:.4f}s"
        )

    if runs_csv:
        write_results_csv(results, runs_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} of {len(tasks)} runs in {elapsed:.2f}s")
    return results


def run_single(exp: ExperimentConfig, seed: int) -> Dict[str, object]:
    """Build the experiment's graph, run one query and collect metrics."""
    start_run = time.time()
    engine = SimpleDijkstraEngine()

    if exp.kind == MAZE:
        graph = MazeGraph(exp.maze, terrain_cost(exp.terrain, exp.default_cost))
        src = find_position(graph.grid, START)
        dst = find_position(graph.grid, TARGET)
        if src is None or dst is None:
            raise ValueError(f"Maze '{exp.name}' needs both 'S' and 'T' cells.")
        vertex_count = len(graph.get_vertices())
    else:
        graph = build_random_graph(exp.vertices, exp.edge_probability, exp.max_weight, seed=seed)
        src, dst = random_endpoints(exp.vertices, seed=seed)
        vertex_count = len(graph.get_vertices())

    result = engine.shortest_path_with_cost(graph, src, dst)
    path, cost = result if result is not None else ([], None)

    return {
        "experiment": exp.name,
        "kind": exp.kind,
        "seed": seed,
        "vertices": vertex_count,
        "start": str(src),
        "dest": str(dst),
        "reachable": result is not None,
        "cost": cost,
        "path_length": len(path),
        "edges_examined": engine.last_edges_examined,
        "heap_pops": engine.last_heap_pops,
        "heap_pushes": engine.last_heap_pushes,
        "relaxed": engine.last_relaxed,
        "duration_sec": time.time() - start_run,
    }


def summarize_results(results: Iterable[Mapping[str, object]]) -> List[Dict[str, object]]:
    """
    Aggregate metrics per experiment.

    avg_cost only averages over reachable runs and is None if there were none.
    """
    buckets: Dict[str, List[Mapping[str, object]]] = {}
    for res in results:
        buckets.setdefault(str(res["experiment"]), []).append(res)

    rows: List[Dict[str, object]] = []
    for name, runs in buckets.items():
        n = len(runs)
        costs = [float(r["cost"]) for r in runs if r["reachable"]]  # type: ignore[arg-type]
        pops = [float(r["heap_pops"]) for r in runs]  # type: ignore[arg-type]
        rows.append(
            {
                "experiment": name,
                "kind": runs[0]["kind"],
                "runs": n,
                "reachable_fraction": len(costs) / n if n else 0.0,
                "avg_cost": sum(costs) / len(costs) if costs else None,
                "avg_heap_pops": sum(pops) / n if n else 0.0,
            }
        )
    return rows


def write_results_csv(results: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key) for key in RESULT_FIELDS})


def write_summary_csv(summary: Iterable[Mapping[str, object]], path: Path) -> None:
    fieldnames = ["experiment", "kind", "runs", "reachable_fraction", "avg_cost", "avg_heap_pops"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in summary:
            writer.writerow({key: row.get(key) for key in fieldnames})


def main() -> None:
    config_path = Path(__file__).parent / "experiments" / "experiments.yml"
    out_dir = Path(__file__).parent / "experiments" / "results"
    runs_csv = out_dir / "runs.csv"
    summary_csv = out_dir / "summary.csv"

    results = run_experiments(config_path, runs_csv=runs_csv)
    summary = summarize_results(results)
    write_summary_csv(summary, summary_csv)
    for row in summary:
        print(row)
    print(f"Wrote runs to {runs_csv} and summary to {summary_csv}")


if __name__ == "__main__":
    main()
