from enum import Enum
from typing import List

from covid_tracker.models.country_table import CountryTable
from covid_tracker.models.schemas import DataType

QUIT_KEYS = ('q', 'escape')
SORT_KEYS = {data_type.key: data_type for data_type in DataType}


class Mode(Enum):
    RUNNING = 'running'
    QUITTING = 'quitting'


class AppState():
    def __init__(self, table: CountryTable):
        """Selection and sort state of the dashboard.

        Args:
            table (CountryTable): Aggregated country records.
        """
        self.table = table
        self.mode = Mode.RUNNING
        self.selected = 0
        self.sort_by = DataType.CONFIRMED
        self.rows = table.get_table_rows(self.sort_by)
        self._update_selected_country()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def _update_selected_country(self) -> None:
        self.selected_country = self.rows[self.selected][0]

    def move_down(self) -> None:
        self.selected += 1
        if self.selected > self.row_count - 1:
            self.selected = 0
        self._update_selected_country()

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1
        else:
            self.selected = self.row_count - 1
        self._update_selected_country()

    def sort(self, sort_by: DataType) -> None:
        """
        Re-sorts the table. The selected index stays where it is, so the selected country may change.

        Args:
            sort_by (DataType): Metric to sort by.
        """
        self.sort_by = sort_by
        self.rows = self.table.get_table_rows(sort_by)
        self._update_selected_country()

    def handle_key(self, key: str) -> bool:
        """
        Applies a key press to the state.

        Args:
            key (str): Normalised key name ('up', 'down', 'escape') or the typed character.

        Returns:
            bool: False once the dashboard should quit.
        """
        if key in QUIT_KEYS:
            self.mode = Mode.QUITTING
        elif key == 'down':
            self.move_down()
        elif key == 'up':
            self.move_up()
        elif key in SORT_KEYS:
            self.sort(SORT_KEYS[key])

        return self.mode == Mode.RUNNING

    def scroll_offset(self, visible_rows: int) -> int:
        # First row to draw so that the selected row stays on screen
        if visible_rows <= 0:
            return self.selected
        return max(0, self.selected - visible_rows + 1)

    def window(self, visible_rows: int) -> List[List[str]]:
        offset = self.scroll_offset(visible_rows)
        return self.rows[offset:offset + max(visible_rows, 1)]
