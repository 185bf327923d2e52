from waterfall.errors import GridConfigurationError, GridIndexError
from waterfall.grid_slice import GridSlice, column_slice, strided_position, indexed
from waterfall.axis import Axis, Column, Row, HorizontalAlignment, VerticalAlignment, WaterfallItems
from waterfall.item_info import WaterfallItemInfo
from waterfall.grid import WaterfallGrid, default_id
