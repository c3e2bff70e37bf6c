# tinynn

A small toolkit for feed-forward neural networks whose parameters are kept in
plain text files. It can generate randomly initialised models from presets,
import models already written in the same format, and run inference on them.
It uses only the Python standard library.

## Installing

```
pip install .
```

## The interactive tool

```
tinynn
```

Options:

- `--models-dir DIR`: where models are kept (default `models`).
- `--data-dir DIR`: where input CSV files are looked for (default `data`).

The main menu offers:

1. **Generate a New Model**: pick a preset (Micro, Small, Medium, Large or
   Huge). The model is written to `<models-dir>/generated_model`; the files
   already in that directory are removed first. Weights and biases are drawn
   uniformly from -1 to 1 and written with six decimals.
2. **Run Inference on a Model**: pick one of the model directories found
   directly under the models directory (any subdirectory holding an
   `architecture.txt`), then feed it either dummy input (all `1.0`) or one of
   the `.csv` files in the data directory. An input file with fewer values
   than the model expects is padded with zeros, with a warning. The class
   probabilities and their sum are printed.
3. **Import External Model**: give the path to a model directory and a new
   name; the files in it are copied to `<models-dir>/<name>`. If the source
   has no `architecture.txt`, nothing is copied.
0. **Exit** (end of input or Ctrl-C also leaves the menu).

## Model format

A model directory holds:

- `architecture.txt`: the input size, the output size, the number of hidden
  layers, then one size per layer (the hidden layers plus the output layer),
  as whitespace-separated integers.
- `layer_<i>_weights.csv`: one row per neuron of layer `i`, one value per
  input to that layer, separated by commas.
- `layer_<i>_biases.csv`: one value per neuron of layer `i`, separated by
  commas.

Values may be separated by commas, whitespace or both. Hidden layers use ReLU;
the last layer uses softmax.

## Using it from Python

```python
from tinynn.model import load_model

model = load_model("models/generated_model")
probabilities = model.forward([1.0] * model.input_size)
```

- `tinynn.model`: `load_model` returns a `Model` and raises `ModelLoadError`
  when a file is missing, malformed or holds too few values;
  `Model.forward` raises `ValueError` when given the wrong number of inputs;
  `read_float_csv` reads a fixed number of floats from a file.
- `tinynn.activations`: `relu`, `sigmoid` and `softmax` (which returns a new
  list and raises `ValueError` for an empty input).
- `tinynn.generator`: the `ModelPreset` class, the `PRESETS` tuple,
  `generate_model(preset, directory, rng=None)` and `clear_directory`.
- `tinynn.manager`: `discover_models`, `is_valid_model_dir`, and
  `import_model`, which raises `ModelImportError` for an invalid source or an
  empty name.
- `tinynn.cli`: `load_input_from_file`, `list_csv_files`, `run_inference`
  and `main`.

## What it does not do

tinynn only runs models; it does not train them. New models come either from
the random presets or from files prepared elsewhere in the format above.

## Running the tests

```
pip install ".[test]"
pytest
```