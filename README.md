# graphlayout

A small graph layout toolkit:

- a graph model (`Node`, `Edge`, `Graph`) with JSON round-tripping,
- a force-directed layout engine in the spirit of fCoSE (`FcoseLayoutEngine`),
- a benchmark runner that lays out sample graphs and records quality metrics,
- generators for sample graphs in JSON, CSV and DOT formats.

## Installation

```bash
pip install .
```

For running the tests:

```bash
pip install ".[test]"
pytest
```

## Library use

```python
from graphlayout.types import Graph, Node, Edge
from graphlayout.fcose import FcoseOptions, apply_layout

graph = Graph()
graph.add_node(Node("a"))
graph.add_node(Node("b").with_position(100.0, 0.0))
graph.add_edge(Edge("a-b", "a", "b"))

apply_layout(graph, FcoseOptions())
print(graph.to_json())
```

`FcoseOptions` defaults to quality `"default"` (50 iterations; `"draft"` runs
30, `"proof"` runs 100), a node repulsion of 4500, an ideal edge length of 50
and a node overlap of 10 percent. Nodes without a position are placed at
random within a radius of 100 before the forces are applied, and overlaps are
removed as a final step.

`graph_from_file_data` in `graphlayout.types` builds a `Graph` from a document
holding `nodes` and `edges` lists, the form the generators write; nodes with a
non-zero `x` or `y` but no `position` take `(x, y)` as their position.

`LayoutManager` in `graphlayout.manager` wraps a graph behind a string-based
interface: add and remove nodes and edges, load or dump the graph as JSON, and
apply the layout from a JSON options document (`FcoseOptions.to_dict` shows its
shape). Malformed JSON input raises `ValueError`.

## Benchmarks

```bash
graphlayout benchmark results.csv
```

Every `.json` file in `docs/sample` is loaded, laid out with the default
options, and one CSV row is written per graph: timestamp, graph name, layout
name, node and edge counts, execution time in milliseconds, average edge
length and node distribution score (the root-mean-square distance of nodes
from their centre). Files that cannot be read or parsed are reported on
standard error and skipped. From Python, `run_all_benchmarks(output_path,
sample_dir)` takes another sample directory and returns the results.

## Sample graph generators

Each generator writes to a path under `docs/sample` unless told otherwise and
creates missing directories. Every generator function also takes an optional
`random.Random` instance, so results can be made reproducible.

```bash
generate_json_graph [output_path] [node_count]
generate_csv_graph [nodes|edges] [output_path] [count]
generate_dot_graph [output_path] [node_count] [directed|undirected]
generate_layout_graph [output_path] [layout_type] [node_count]
generate_domain_graph [domain] [output_path] [node_count]
generate_medicine_graph [output_path] [node_count]
generate_large_graph [output_path] [node_count] [edge_density]
```

- `generate_json_graph`: a technology knowledge graph of concepts, people,
  organizations, papers and applications (default 50 nodes).
- `generate_csv_graph`: a node list or an edge list in CSV (default 50 rows).
- `generate_dot_graph`: a Graphviz DOT graph, directed by default (default 30 nodes).
- `generate_layout_graph`: a graph shaped for a given layout (`fcose`,
  `cose-bilkent`, `cise`, `concentric`, `klay`, `dagre`; `preset` adds node
  positions) together with matching layout options (default `fcose`, 50 nodes).
- `generate_domain_graph`: a graph for the `programming`, `science`,
  `business` or `medicine` domain (default `programming`, 50 nodes); an
  unknown domain falls back to `programming` with a warning.
- `generate_medicine_graph`: a medical knowledge graph of diseases, drugs,
  symptoms, treatments and more (default 50 nodes).
- `generate_large_graph`: a large graph for performance testing, controlled
  by edge density (default 1000 nodes, density 0.01).

`graphlayout.generators.programming_graph.generate_programming_graph` builds a
richer programming-domain graph (languages, frameworks, libraries, tools,
platforms, people); it is available from Python only.

JSON output has the form:

```json
{
  "nodes": [{"id": "n1", "label": "Node 1", "x": 100, "y": 100, "type": "concept"}],
  "edges": [{"source": "n1", "target": "n2", "type": "relates_to", "weight": 0.8}]
}
```

## What is not included

There is no single command that runs every generator to fill `docs/sample`
with a full sample set; run the generators above one by one with the
parameters you want.