"""UI components module."""
from .charts import ChartRenderer
from .components import UIRenderer

__all__ = ["ChartRenderer", "UIRenderer"]
