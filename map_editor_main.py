#! /usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
import sys

import numpy as np
import matplotlib.pyplot as plt

# grid model
from occupancy_editor.core import GridStore, start_relative_view
# map exporters
from occupancy_editor.export import write_ros_map, write_csv, write_json, write_png
# configuration and plotting
from occupancy_editor.utils import (load_config, get_grid_params, get_generator_options,
                                    get_export_params, print_config, plot_grid)


def export_all(state, params):
    directory = params['directory']
    basename = params['basename']
    shift = params['shift_to_start']
    written = []
    for fmt in params['formats']:
        if fmt == 'ros':
            written.extend(write_ros_map(state, directory, basename, shift_to_start=shift))
        elif fmt == 'csv':
            written.append(write_csv(state, os.path.join(directory, f"{basename}.csv"), shift))
        elif fmt == 'json':
            written.append(write_json(state, os.path.join(directory, f"{basename}.json"), shift))
        elif fmt == 'png':
            written.append(write_png(state, os.path.join(directory, f"{basename}.png")))
        else:
            raise ValueError(f"Unknown export format: {fmt}")
    return written


def main(config_path="config.yaml"):
    # Load configuration
    try:
        config = load_config(config_path)
        print("=== Configuration Loaded ===")
        print_config(config)
        print("=" * 30 + "\n")
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    log_cfg = config.get('logging')
    logging.basicConfig(level=getattr(logging, log_cfg.level if log_cfg else 'INFO'),
                        format="%(levelname)s %(name)s: %(message)s")

    # Random source for the generators
    rng = np.random.default_rng(config.get('random_seed'))

    store = GridStore(**get_grid_params(config))
    options = get_generator_options(config)
    print(f"Running generator: {config.generator.mode}")
    store.generate(options, rng=rng)

    grid = config.grid
    if grid.get('start') is not None:
        store.set_start(*grid.start)
    if grid.get('goal') is not None:
        store.set_goal(*grid.goal)

    state = store.state
    params = get_export_params(config)
    for path in export_all(state, params):
        print(f"Saved {path}")

    if params['shift_to_start'] and state.metadata.start is not None:
        metadata, _, _ = start_relative_view(state)
        print(f"World origin moved to start: "
              f"({metadata.origin.x:.3f}, {metadata.origin.y:.3f}, {metadata.origin.theta:.3f})")

    vis = config.get('visualization')
    if vis is not None and vis.show:
        fig, ax = plt.subplots(figsize=(vis.figure_width, vis.figure_height))
        plot_grid(state, ax=ax, title=f"Generated Map ({config.generator.mode})",
                  show_center=True)
        plt.show()
    return 0


# = MAIN PROGRAM =

if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "config.yaml"))
