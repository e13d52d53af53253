import curses
import logging
import queue
import threading

ESCAPE = 27

KEY_NAMES = {
    curses.KEY_UP: 'up',
    curses.KEY_DOWN: 'down',
    ESCAPE: 'escape',
}


def normalise_key(key_code: int) -> str:
    """
    Maps a curses key code to the name used by the dashboard.

    Args:
        key_code (int): Code returned by getch().

    Returns:
        str: 'up', 'down', 'escape', the typed character, or '' for keys without a printable form.
    """
    if key_code in KEY_NAMES:
        return KEY_NAMES[key_code]
    if 0 <= key_code < 0x110000:
        char = chr(key_code)
        if char.isprintable():
            return char
    return ''


class Events():
    def __init__(self, stdscr=None):
        """Forwards key presses from a reader thread to the main loop.

        Args:
            stdscr (optional): Curses window to read from. Defaults to a window set up by start().
        """
        self.stdscr = stdscr
        self.owns_screen = stdscr is None
        self.queue = queue.Queue()
        self.thread = None

    def start(self) -> 'Events':
        if self.owns_screen:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            # Short escape delay so Esc is not mistaken for the start of an arrow key sequence
            curses.set_escdelay(25)
            self.stdscr.refresh()

        self.thread = threading.Thread(target=self._read_keys, name='key-reader', daemon=True)
        self.thread.start()
        return self

    def _read_keys(self) -> None:
        while True:
            key_code = self.stdscr.getch()
            if key_code == -1:
                continue
            key = normalise_key(key_code)
            if key:
                self.queue.put(key)

    def next(self, timeout: float = None) -> str:
        """Blocks until the next key press."""
        return self.queue.get(timeout=timeout)

    def stop(self) -> None:
        # The reader thread is left blocked on getch(); it dies with the process
        if self.owns_screen and self.stdscr is not None:
            self.stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
            curses.endwin()
            logging.info('Terminal modes restored')

    def __enter__(self) -> 'Events':
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
