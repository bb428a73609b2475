import logging
import os
from collections import namedtuple
from time import time
from typing import List, Optional

import numpy as np
import pandas as pd

from graph_search.exceptions import InfeasibleGeneration
from graph_search.graph import Graph
from graph_search.instances.instance_generator import GeneratorConfig, InstanceGenerator
from graph_search.traversal.search_type import SearchType, find_path, is_valid_path
from graph_search.utils import format_path, plot_network

logger = logging.getLogger(__name__)

SearchReport = namedtuple("SearchReport", field_names=["search_type", "path", "elapsed"])
TrialReport = namedtuple("TrialReport", field_names=["graph", "source", "target", "searches"])


def run_search(graph: Graph, source: int, target: int, search_type: SearchType) -> SearchReport:
    start_time = time()
    path = find_path(graph, source, target, search_type)
    elapsed = time() - start_time
    if path and not is_valid_path(graph, path, source, target):
        logger.error("%s returned an invalid path %s from %d to %d", search_type.name, path, source, target)
    return SearchReport(search_type, path, elapsed)


def run_trial(graph: Graph,
              trial_idx: int,
              source: int,
              target: int,
              print_to_file=None,
              plot_to_path: Optional[str] = None) -> TrialReport:
    print("Adjacency matrix:", file=print_to_file)
    graph.print_adj_matrix(file=print_to_file)

    print("Incidence matrix:", file=print_to_file)
    graph.print_inc_matrix(file=print_to_file)

    print("Adjacency list:", file=print_to_file)
    graph.print_adj_list(file=print_to_file)

    print(f"Graph {trial_idx} with {graph.n} vertices and {graph.number_of_edges()} edges", file=print_to_file)

    searches = []
    for search_type in SearchType:
        report = run_search(graph, source, target, search_type)
        name = search_type.name
        print(f"{name} shortest path from vertex {source} to vertex {target}: {format_path(report.path)}",
              file=print_to_file)
        print(f"{name} shortest path time: {report.elapsed:.6f} seconds", file=print_to_file)
        searches.append(report)
    print("\n", file=print_to_file, flush=True)

    if plot_to_path is not None:
        plot_network(graph, *(report.path for report in searches), save_to_path=plot_to_path)
        logger.info("Saved plot of graph %d to %s", trial_idx, plot_to_path)

    return TrialReport(graph, source, target, searches)


def summarize_times(trials: List[TrialReport]) -> pd.DataFrame:
    times = pd.DataFrame(
        [{report.search_type.name: report.elapsed for report in trial.searches} for trial in trials],
        columns=[search_type.name for search_type in SearchType],
    )
    return times.describe()


def run_demo(params: dict,
             seed: Optional[int] = None,
             print_to_file=None) -> List[TrialReport]:
    # Params with defaults
    n_graphs = params.get('n_graphs', 10)
    plot_dir = params.get('plot_dir')

    instance_generator = InstanceGenerator(GeneratorConfig.from_params(params))
    rng = np.random.RandomState(abs(seed % (2**32))) if seed is not None else np.random

    if plot_dir is not None:
        os.makedirs(plot_dir, exist_ok=True)

    trials = []
    for trial_idx in range(1, n_graphs + 1):
        graph_seed = rng.randint(2**31 - 1) if seed is not None else None
        try:
            graph = instance_generator.generate_graph(graph_seed)
        except InfeasibleGeneration:
            logger.warning("Could not generate graph %d with params %s", trial_idx, params)
            raise
        source = rng.randint(graph.n)
        target = rng.randint(graph.n)
        plot_to_path = os.path.join(plot_dir, f"graph_{trial_idx}.png") if plot_dir is not None else None
        trials.append(run_trial(graph, trial_idx, int(source), int(target),
                                print_to_file=print_to_file, plot_to_path=plot_to_path))

    if trials:
        print("Search times (seconds):", file=print_to_file)
        print(summarize_times(trials).to_string(), file=print_to_file)

    return trials
