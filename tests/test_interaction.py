"""
Tests for the demo driver and its command line entry point.
"""

import io

import pytest

from graph_search.exceptions import InfeasibleGeneration
from graph_search.interaction import run_demo, run_search, run_trial, summarize_times
from graph_search.run_demo import main
from graph_search.traversal.search_type import SearchType
from graph_search.utils import NO_PATH, format_path, plot_network


class TestRunTrial:
    def test_report_sections(self, diamond):
        out = io.StringIO()
        run_trial(diamond, 1, 0, 2, print_to_file=out)
        text = out.getvalue()
        sections = ["Adjacency matrix:", "Incidence matrix:", "Adjacency list:", "Graph 1 with 4 vertices and 4 edges"]
        positions = [text.index(section) for section in sections]
        assert positions == sorted(positions)
        assert "BFS shortest path from vertex 0 to vertex 2: 0 1 2" in text
        assert "DFS shortest path from vertex 0 to vertex 2: 0 3 2" in text
        assert "BFS shortest path time:" in text
        assert "DFS shortest path time:" in text

    def test_missing_path_reported(self, disconnected):
        out = io.StringIO()
        trial = run_trial(disconnected, 2, 0, 3, print_to_file=out)
        assert f"BFS shortest path from vertex 0 to vertex 3: {NO_PATH}" in out.getvalue()
        assert [report.path for report in trial.searches] == [[], []]

    def test_returns_both_searches(self, diamond):
        trial = run_trial(diamond, 1, 0, 2, print_to_file=io.StringIO())
        assert [report.search_type for report in trial.searches] == [SearchType.BFS, SearchType.DFS]
        assert all(report.elapsed >= 0 for report in trial.searches)
        assert (trial.source, trial.target) == (0, 2)

    def test_plot_saved(self, diamond, tmp_path):
        plot_path = tmp_path / "diamond.png"
        run_trial(diamond, 1, 0, 2, print_to_file=io.StringIO(), plot_to_path=str(plot_path))
        assert plot_path.exists()


class TestRunDemo:
    def test_runs_requested_number_of_graphs(self, small_params):
        out = io.StringIO()
        trials = run_demo(small_params, seed=3, print_to_file=out)
        assert len(trials) == 3
        for trial in trials:
            assert 6 <= trial.graph.n <= 8
            assert 0 <= trial.source < trial.graph.n
            assert 0 <= trial.target < trial.graph.n
        text = out.getvalue()
        assert "Graph 3 with" in text
        assert "Search times (seconds):" in text

    def test_same_seed_same_trials(self, small_params):
        first = run_demo(small_params, seed=10, print_to_file=io.StringIO())
        second = run_demo(small_params, seed=10, print_to_file=io.StringIO())
        assert [t.graph.get_edges() for t in first] == [t.graph.get_edges() for t in second]
        assert [(t.source, t.target) for t in first] == [(t.source, t.target) for t in second]
        assert [t.searches[0].path for t in first] == [t.searches[0].path for t in second]

    def test_infeasible_params_raise(self, small_params):
        params = {**small_params, 'min_edges': 50, 'max_edges': 50}
        with pytest.raises(InfeasibleGeneration):
            run_demo(params, seed=0, print_to_file=io.StringIO())

    def test_plots_written(self, small_params, tmp_path):
        params = {**small_params, 'n_graphs': 2, 'plot_dir': str(tmp_path / "plots")}
        run_demo(params, seed=1, print_to_file=io.StringIO())
        assert sorted(p.name for p in (tmp_path / "plots").iterdir()) == ["graph_1.png", "graph_2.png"]

    def test_summarize_times(self, diamond):
        trials = [run_trial(diamond, i, 0, 2, print_to_file=io.StringIO()) for i in range(1, 4)]
        summary = summarize_times(trials)
        assert list(summary.columns) == ["BFS", "DFS"]
        assert summary.loc["count", "BFS"] == 3


class TestMain:
    def test_default_demo_succeeds(self, capsys):
        assert main(["--seed", "0"]) == 0
        out = capsys.readouterr().out
        assert out.count("Adjacency matrix:") == 10
        assert "Graph 10 with 10 vertices and 10 edges" in out

    def test_directed_demo(self, capsys):
        argv = ["--graphs", "2", "--directed", "--max-incoming", "3", "--max-outgoing", "3", "--seed", "5"]
        assert main(argv) == 0
        assert "Graph 2 with" in capsys.readouterr().out

    def test_infeasible_demo_fails(self, capsys):
        assert main(["--vertices", "3", "3", "--edges", "5", "5"]) == 1

    def test_log_level_case_insensitive(self, capsys):
        assert main(["--graphs", "1", "--seed", "2", "--log-level", "debug"]) == 0

    def test_unknown_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "verbose"])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestUtils:
    def test_format_path(self):
        assert format_path([0, 3, 2]) == "0 3 2"
        assert format_path([]) == NO_PATH

    def test_run_search(self, diamond):
        report = run_search(diamond, 0, 2, SearchType.BFS)
        assert report.path == [0, 1, 2]
        assert report.search_type is SearchType.BFS

    def test_plot_network_returns_figure(self, diamond):
        fig, ax = plot_network(diamond, [0, 1, 2], [])
        assert fig is not None
        assert ax is not None
