from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from covid_tracker.dashboard.app_state import AppState
from covid_tracker.dashboard.chart import LineChart
from covid_tracker.dashboard.events import Events
from covid_tracker.models.country_table import CountryTable
from covid_tracker.models.schemas import DataType, format_percentage
from covid_tracker.utils.date_utils import format_update_label

TABLE_TITLE = 'Corona virus - Sort by: (c) confirmed, (d) deaths, (r) recovered'
TABLE_HEADER = ['Country', 'Confirmed', 'Deaths', 'Deaths (%)', 'Recovered', 'Recovered (%)']
SUMMARY_HEIGHT = 6
# Panel borders and the table header row
TABLE_CHROME = 4

SERIES_STYLES = {
    DataType.CONFIRMED: 'cyan',
    DataType.DEATHS: 'red',
    DataType.RECOVERED: 'yellow',
}


def summary_lines(table: CountryTable) -> list[str]:
    total = table.total
    return [
        f'Updated: {format_update_label(total.headers)}',
        f'Total confirmed: {total.confirmed}',
        f'Total deaths: {total.deaths} ({format_percentage(total.deaths, total.confirmed)})',
        f'Total recovered: {total.recovered} ({format_percentage(total.recovered, total.confirmed)})',
    ]


class Dashboard():
    def __init__(self, table: CountryTable, console: Console = None):
        """Terminal dashboard: country table, chart of the selected country and a summary.

        Args:
            table (CountryTable): Aggregated country records.
            console (Console, optional): Rich console to draw on. Defaults to a new Console.
        """
        self.table = table
        self.state = AppState(table)
        self.console = console or Console()
        self.summary = Text('\n'.join(summary_lines(table)))

    def _table_height(self) -> int:
        # Table and chart split what the summary leaves
        return (self.console.size.height - SUMMARY_HEIGHT) // 2

    def render_table(self, height: int) -> Panel:
        visible_rows = max(height - TABLE_CHROME, 1)
        offset = self.state.scroll_offset(visible_rows)
        wide = self.console.size.width > 100

        grid = Table(expand=not wide, box=None, header_style='bold')
        for name in TABLE_HEADER:
            grid.add_column(name, width=15 if wide else None, ratio=None if wide else 1, no_wrap=True)

        for i, row in enumerate(self.state.window(visible_rows), start=offset):
            style = 'bold yellow' if i == self.state.selected else 'white'
            grid.add_row(*row, style=style)

        return Panel(grid, title=TABLE_TITLE, title_align='left')

    def render_chart(self) -> Panel:
        points = self.table.chart_points(self.state.selected_country)
        datasets = [
            (data_type.value.capitalize(), SERIES_STYLES[data_type], series)
            for data_type, series in zip(DataType, points)
        ]
        chart = LineChart(datasets, x_labels=self.table.date_headers)
        return Panel(chart, title=Text(self.state.selected_country, style='bold grey70'), title_align='left')

    def render(self) -> Layout:
        table_height = self._table_height()

        layout = Layout()
        layout.split_column(
            Layout(name='table', size=table_height),
            Layout(name='chart', ratio=1),
            Layout(name='summary', size=SUMMARY_HEIGHT),
        )
        layout['table'].update(self.render_table(table_height))
        layout['chart'].update(self.render_chart())
        layout['summary'].update(Panel(self.summary, title='Summary', title_align='left'))
        return layout

    def run(self, events: Events = None) -> None:
        """
        Draw, block on the next key press, update the state, redraw. Returns when q or Esc is pressed.

        Args:
            events (Events, optional): Key source. Defaults to one reading the terminal with curses.
        """
        events = events or Events()
        with events, Live(self.render(), console=self.console, screen=True, auto_refresh=False) as live:
            running = True
            while running:
                running = self.state.handle_key(events.next())
                if running:
                    live.update(self.render(), refresh=True)
