from typing import List, Optional, Sequence, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.text import Text

Points = Sequence[Tuple[float, float]]

# Dot bit for each (column, row) position inside a 2x4 braille cell
BRAILLE_DOTS = (
    (0x01, 0x02, 0x04, 0x40),
    (0x08, 0x10, 0x20, 0x80),
)
BRAILLE_BASE = 0x2800
# Empty slots after the last date so the lines do not touch the border
X_PADDING = 4
Y_HEADROOM = 1.2


def chart_bounds(datasets: Sequence[Points]) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Axis bounds for a set of datasets.

    Args:
        datasets (Sequence[Points]): (x, y) points of every dataset.

    Returns:
        Tuple: ((x_min, x_max), (y_min, y_max)). Y keeps 20% headroom above the largest value.
    """
    length = max((len(points) for points in datasets), default=0)
    top = max((y for points in datasets for _, y in points), default=0.0) + 1.0
    return (0.0, float(length + X_PADDING)), (0.0, top * Y_HEADROOM)


def y_labels(y_bounds: Tuple[float, float]) -> List[str]:
    top = y_bounds[1]
    return ['0', str(round(top / 2)), str(round(top))]


class BrailleCanvas():
    def __init__(self, width: int, height: int):
        """Character grid where each cell holds 2x4 braille dots.

        Args:
            width (int): Width in characters.
            height (int): Height in characters.
        """
        self.width = width
        self.height = height
        self.cells = [[0] * width for _ in range(height)]
        self.styles: List[List[Optional[str]]] = [[None] * width for _ in range(height)]

    def set(self, px: int, py: int, style: str) -> None:
        # py grows downwards
        if not (0 <= px < self.width * 2 and 0 <= py < self.height * 4):
            return
        col, row = px // 2, py // 4
        self.cells[row][col] |= BRAILLE_DOTS[px % 2][py % 4]
        self.styles[row][col] = style

    def line(self, x0: int, y0: int, x1: int, y1: int, style: str) -> None:
        steps = max(abs(x1 - x0), abs(y1 - y0), 1)
        for i in range(steps + 1):
            self.set(round(x0 + (x1 - x0) * i / steps), round(y0 + (y1 - y0) * i / steps), style)

    def rows(self) -> List[Text]:
        lines = []
        for cells, styles in zip(self.cells, self.styles):
            text = Text()
            for cell, style in zip(cells, styles):
                text.append(chr(BRAILLE_BASE + cell) if cell else ' ', style=style)
            lines.append(text)
        return lines


class LineChart():
    def __init__(self, datasets: Sequence[Tuple[str, str, Points]], x_labels: Sequence[str], height: int = None):
        """Line chart drawn with braille dots.

        Args:
            datasets (Sequence[Tuple[str, str, Points]]): (name, style, points) of each line.
            x_labels (Sequence[str]): Date labels, the first and last are shown under the x axis.
            height (int, optional): Height in lines. Defaults to the height the console offers.
        """
        self.datasets = datasets
        self.x_labels = x_labels
        self.height = height

    def _legend(self) -> Text:
        legend = Text()
        for i, (name, style, _) in enumerate(self.datasets):
            if i:
                legend.append('  ')
            legend.append(f'• {name}', style=style)
        return legend

    def _x_axis_labels(self, offset: int, width: int) -> Text:
        text = Text(' ' * offset, style='italic')
        if not self.x_labels:
            return text
        first, last = self.x_labels[0], self.x_labels[-1]
        gap = max(width - len(first) - len(last), 1)
        text.append(first + ' ' * gap + last if len(self.x_labels) > 1 else first, style='italic')
        return text

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = self.height or options.height or 10
        x_bounds, y_bounds = chart_bounds([points for _, _, points in self.datasets])
        labels = y_labels(y_bounds)
        label_width = max(len(label) for label in labels)

        plot_width = max(options.max_width - label_width - 1, 1)
        # legend, x axis and x labels take one line each
        plot_height = max(height - 3, 1)

        canvas = BrailleCanvas(plot_width, plot_height)
        x_scale = (plot_width * 2 - 1) / (x_bounds[1] - x_bounds[0])
        y_scale = (plot_height * 4 - 1) / (y_bounds[1] - y_bounds[0])
        bottom = plot_height * 4 - 1

        for _, style, points in self.datasets:
            pixels = [(round(x * x_scale), bottom - round(y * y_scale)) for x, y in points]
            if len(pixels) == 1:
                canvas.set(*pixels[0], style)
            for (x0, y0), (x1, y1) in zip(pixels, pixels[1:]):
                canvas.line(x0, y0, x1, y1, style)

        yield self._legend()
        label_rows = {0: labels[2], plot_height // 2: labels[1], plot_height - 1: labels[0]}
        for i, row in enumerate(canvas.rows()):
            line = Text(label_rows.get(i, '').rjust(label_width), style='italic')
            line.append('│', style='grey50')
            line.append_text(row)
            yield line
        yield Text(' ' * label_width + '└' + '─' * plot_width, style='grey50')
        yield self._x_axis_labels(label_width + 1, plot_width)
