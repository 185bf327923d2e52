from plot.tile_spec import TileSpec
from plot.track_builder import build_track_tiles, build_label_trace, main_axis_offsets, tile_shape
from plot.figure_assembler import assemble_waterfall_figure
from plot.rich_plot_progress import run_with_progress, show_with_progress
