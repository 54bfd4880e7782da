#!/usr/bin/env python3
"""
ASCIIliens - Turn-Based Terminal Invaders
A curses-based, turn-based take on Space Invaders.

Features:
- One keypress, one turn: the world only moves when you act
- Marching alien swarm that sweeps sideways and drops a row at each edge
- Score budget: every action costs a point, every alien pays 250
- Intro screen with taunts and a play-again prompt
- Guaranteed terminal restoration on every exit path

License: MIT
"""

import argparse
import curses
import logging
import os
import random
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

# Playable field (the status line and prompt live below it)
GAME_WIDTH = 60
GAME_HEIGHT = 20

# Scoring
INITIAL_SCORE = 100
ACTION_COST = 1
ALIEN_POINTS = 250

# Alien formation
ALIEN_ROWS = 3
ALIEN_COLS = 10
ALIEN_SPACING_X = 4
ALIEN_SPACING_Y = 2
ALIEN_START_Y = 2

# Visual characters
PLAYER_CHAR = "A"
BULLET_CHAR = "|"
EXPLOSION_CHAR = "*"
EMPTY_CHAR = " "
ALIEN_CHARS = ["W", "M", "Y", "V"]

# Keys
KEY_ESCAPE = 27
ESC_DELAY_MS = "25"

# Color pairs
COLOR_PLAYER = 1
COLOR_ALIEN = 2
COLOR_BULLET = 3
COLOR_EXPLOSION = 4

LOG_ENV_VAR = "ASCIILIENS_LOG"
LOG_FORMAT = "[%(asctime)s][%(levelname)s] %(message)s"

# Screen text
TITLE_LINES = [
    "ASCII + Aliens = ASCIIliens",
    "-- The ASCII Invasion Begins! --",
]
INSTRUCTIONS_TEXT = [
    f"Navigate your ship ({PLAYER_CHAR}) using LEFT/RIGHT arrow keys.",
    f"Press SPACE to fire blasts ({BULLET_CHAR}).",
    "Each action (move or fire) advances one game turn.",
    "You cannot move and fire in the same turn. Choose wisely!",
]
SCORING_TEXT = [
    "Scoring:",
    f"- Start with {INITIAL_SCORE} points.",
    f"-{ACTION_COST} point for each move or shot.",
    f"+{ALIEN_POINTS} points for destroying an ASCIIlien.",
]
TAUNT_PHRASES = [
    "Now is not the time for the timid, step up!",
    "Do you fear the ASCIIliens, cadet?",
    "Your pixelated courage is lacking! Try again.",
    "The fate of the terminal rests on your bold choice!",
    "A true hero would not hesitate. Are you a hero?",
]
WIN_ART = [
    "CONGRATULATIONS, COMMANDER!",
    "YOU HAVE REPELLED THE ASCII INVASION!",
]
WIN_FOOTER = "VICTORY IS YOURS!"
LOSE_ART = [
    "MISSION FAILED!",
    "THE ASCII INVASION OVERWHELMED US!",
]
LOSE_FOOTER = "GAME OVER"
READY_PROMPT = "Ready? [Y/n] "
PLAY_AGAIN_PROMPT = "Play again? [Y/n] "
STATUS_HINT = "Arrows move, SPACE fires, q quits"


# ============================================================================
# ENUMS
# ============================================================================

class Action(Enum):
    """Player actions; each one consumes exactly one turn."""
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()


class Command(Enum):
    """Input that does not advance the simulation."""
    QUIT = auto()
    REDRAW = auto()


class Outcome(Enum):
    """Game outcome state machine."""
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class TurnStatus(Enum):
    """Whether apply_turn advanced the world or found the game over."""
    APPLIED = auto()
    ALREADY_OVER = auto()


OUTCOME_MESSAGES = {
    Outcome.WON: "YOU WON! :)",
    Outcome.LOST: "YOU LOST :(",
    Outcome.IN_PROGRESS: "GAME ENDED",
}


# ============================================================================
# ERRORS
# ============================================================================

class AsciiliensError(Exception):
    """Base class for game errors."""


class TerminalSetupFailure(AsciiliensError):
    """The terminal could not be prepared for play."""


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass
class Player:
    """Player ship. Its row never changes during a game."""
    x: int
    y: int
    alive: bool = True


@dataclass
class Bullet:
    """Player blast travelling up the field."""
    x: int
    y: int

    def move_up(self) -> None:
        self.y -= 1


@dataclass
class Alien:
    """Individual alien with position and glyph."""
    x: int
    y: int
    char: str = ALIEN_CHARS[0]
    alive: bool = True


Entity = Union[Player, Bullet, Alien]


@dataclass
class World:
    """
    Complete mutable state of one game session.

    Only the turn engine mutates a World; the renderer reads it.
    """
    width: int
    height: int
    player: Player
    aliens: List[Alien] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    score: int = INITIAL_SCORE
    outcome: Outcome = Outcome.IN_PROGRESS
    direction: int = 1  # 1=right, -1=left
    turn: int = 0
    explosions: List[Tuple[int, int]] = field(default_factory=list)

    def __post_init__(self):
        """Reject worlds whose entities lie outside the field."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid field size {self.width}x{self.height}")
        if self.direction not in (1, -1):
            raise ValueError(f"invalid swarm direction {self.direction}")
        entities: List[Entity] = [self.player, *self.aliens, *self.bullets]
        for entity in entities:
            if not self.in_bounds(entity.x, entity.y):
                raise ValueError(
                    f"{type(entity).__name__} at ({entity.x}, {entity.y}) is outside "
                    f"the {self.width}x{self.height} field"
                )

    @classmethod
    def create(cls, width: int = GAME_WIDTH, height: int = GAME_HEIGHT,
               rng: Optional[random.Random] = None) -> 'World':
        """
        Build a fresh world with the standard alien formation.

        Args:
            width: Number of columns in the field.
            height: Number of rows in the field.
            rng: Source for alien glyphs; a new unseeded one if omitted.

        Returns:
            A World with the player centred on the bottom row.
        """
        rng = rng or random.Random()
        player = Player(x=width // 2, y=height - 1)
        return cls(width=width, height=height, player=player,
                   aliens=cls._formation(width, height, rng))

    @staticmethod
    def _formation(width: int, height: int, rng: random.Random) -> List[Alien]:
        """Create the alien grid, centred and clipped to the field."""
        cols = min(ALIEN_COLS, (width - 1) // ALIEN_SPACING_X + 1)
        span = (cols - 1) * ALIEN_SPACING_X + 1
        start_x = max(0, (width - span) // 2)

        aliens = []
        for row in range(ALIEN_ROWS):
            y = ALIEN_START_Y + row * ALIEN_SPACING_Y
            if y >= height - 1:
                break
            for col in range(cols):
                x = start_x + col * ALIEN_SPACING_X
                aliens.append(Alien(x=x, y=y, char=rng.choice(ALIEN_CHARS)))
        return aliens

    @property
    def bottom_row(self) -> int:
        return self.height - 1

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def alien_count(self) -> int:
        return len(self.aliens)

    def alien_at(self, x: int, y: int) -> Optional[Alien]:
        for alien in self.aliens:
            if alien.x == x and alien.y == y:
                return alien
        return None

    def is_alive(self, entity: Entity) -> bool:
        """
        Check whether an entity is still part of the game.

        Bullets are alive while in flight; aliens while in the swarm.
        """
        if isinstance(entity, Player):
            return entity is self.player and entity.alive
        if isinstance(entity, Alien):
            return entity.alive and any(a is entity for a in self.aliens)
        if isinstance(entity, Bullet):
            return any(b is entity for b in self.bullets)
        raise TypeError(f"not a game entity: {entity!r}")


@dataclass
class TurnResult:
    """What a single call to apply_turn did."""
    status: TurnStatus
    outcome: Outcome
    score: int
    aliens_destroyed: int = 0
    score_delta: int = 0

    @property
    def already_over(self) -> bool:
        return self.status is TurnStatus.ALREADY_OVER


# ============================================================================
# TURN ENGINE
# ============================================================================

def apply_turn(world: World, action: Action) -> TurnResult:
    """
    Advance the world by exactly one turn.

    Order: score cost, player action, bullets, hits, swarm, hits, win/lose.

    Args:
        world: The session's world; mutated in place.
        action: The player's action for this turn.

    Returns:
        TurnResult describing the turn. If the game had already ended the
        world is untouched and the status is ALREADY_OVER.
    """
    if not isinstance(action, Action):
        raise TypeError(f"expected an Action, got {action!r}")

    if world.is_over:
        logger.debug("Ignoring %s: game already over (%s)", action.name, world.outcome.name)
        return TurnResult(TurnStatus.ALREADY_OVER, world.outcome, world.score)

    score_before = world.score
    world.turn += 1
    world.explosions.clear()

    world.score -= ACTION_COST
    _resolve_action(world, action)

    # Resolved after each advance so a bullet and an alien never swap cells
    _advance_bullets(world)
    destroyed = _resolve_hits(world)
    _advance_swarm(world)
    destroyed += _resolve_hits(world)
    world.score += destroyed * ALIEN_POINTS

    if not world.aliens:
        world.outcome = Outcome.WON
    else:
        check_invasion(world)

    logger.debug("Turn %d: %s, score %d, %d destroyed, %d aliens left, %s",
                 world.turn, action.name, world.score, destroyed,
                 world.alien_count(), world.outcome.name)

    return TurnResult(
        status=TurnStatus.APPLIED,
        outcome=world.outcome,
        score=world.score,
        aliens_destroyed=destroyed,
        score_delta=world.score - score_before,
    )


def _resolve_action(world: World, action: Action) -> None:
    """Move the player or fire. Moves clamp at the field edges."""
    player = world.player
    if action is Action.MOVE_LEFT:
        player.x = max(0, player.x - 1)
    elif action is Action.MOVE_RIGHT:
        player.x = min(world.width - 1, player.x + 1)
    elif action is Action.FIRE:
        # Spawned in the player's cell; the bullet advance lifts it one row.
        world.bullets.append(Bullet(x=player.x, y=player.y))


def _advance_bullets(world: World) -> None:
    """Move every bullet up a row and drop those that left the field."""
    for bullet in world.bullets:
        bullet.move_up()
    world.bullets = [b for b in world.bullets if b.y >= 0]


def _advance_swarm(world: World) -> None:
    """Move the alien formation one step of its marching pattern."""
    if not world.aliens:
        return

    min_x = min(a.x for a in world.aliens)
    max_x = max(a.x for a in world.aliens)

    # At an edge: reverse and drop a row instead of stepping sideways
    if (world.direction > 0 and max_x >= world.width - 1) or \
       (world.direction < 0 and min_x <= 0):
        world.direction = -world.direction
        for alien in world.aliens:
            alien.y += 1
    else:
        for alien in world.aliens:
            alien.x += world.direction


def _resolve_hits(world: World) -> int:
    """
    Destroy every alien sharing a cell with a bullet.

    All bullets on a hit cell are consumed, but the alien only counts once.

    Returns:
        Number of aliens destroyed this turn.
    """
    bullet_cells = {(b.x, b.y) for b in world.bullets}
    hit_cells = set()
    survivors = []

    for alien in world.aliens:
        cell = (alien.x, alien.y)
        if cell in bullet_cells:
            alien.alive = False
            hit_cells.add(cell)
            world.explosions.append(cell)
        else:
            survivors.append(alien)

    world.aliens = survivors
    if hit_cells:
        world.bullets = [b for b in world.bullets if (b.x, b.y) not in hit_cells]
    return len(hit_cells)


def check_invasion(world: World) -> None:
    """
    Check if any alien has reached the player's row, the player's cell or
    the bottom row. Any of these ends the game as LOST.
    """
    player = world.player
    for alien in world.aliens:
        if alien.x == player.x and alien.y == player.y:
            player.alive = False
            world.outcome = Outcome.LOST
        elif alien.y >= player.y or alien.y >= world.bottom_row:
            world.outcome = Outcome.LOST


# ============================================================================
# RENDERING
# ============================================================================

def compose_screen(world: World, final: bool = False) -> List[str]:
    """
    Serialize the world into fixed-size text lines.

    Args:
        world: World to draw; never modified.
        final: Overlay the outcome banner and final score.

    Returns:
        world.height field rows followed by one status line, each exactly
        world.width characters wide.
    """
    grid = [[EMPTY_CHAR] * world.width for _ in range(world.height)]

    for x, y in world.explosions:
        grid[y][x] = EXPLOSION_CHAR
    for alien in world.aliens:
        grid[alien.y][alien.x] = alien.char
    for bullet in world.bullets:
        grid[bullet.y][bullet.x] = BULLET_CHAR

    player = world.player
    grid[player.y][player.x] = PLAYER_CHAR if player.alive else EXPLOSION_CHAR

    lines = ["".join(row) for row in grid]
    if final:
        _overlay_banner(lines, world)
    lines.append(_status_line(world, final))
    return lines


def _overlay_banner(lines: List[str], world: World) -> None:
    """Write the outcome banner over the middle of the field."""
    banner = [
        OUTCOME_MESSAGES[world.outcome],
        f"Final score: {world.score}",
    ]
    top = max(0, world.height // 2 - len(banner) // 2)
    for offset, text in enumerate(banner):
        y = top + offset
        if y >= world.height:
            break
        text = f"  {text}  "[:world.width]
        x = (world.width - len(text)) // 2
        lines[y] = lines[y][:x] + text + lines[y][x + len(text):]


def _status_line(world: World, final: bool) -> str:
    if final or world.is_over:
        message = OUTCOME_MESSAGES[world.outcome]
    else:
        message = STATUS_HINT
    text = f"Score: {world.score}  Turn: {world.turn}  {message}"
    return text[:world.width].ljust(world.width)


def compose_intro(width: int, taunt: Optional[str] = None) -> List[str]:
    """
    Build the intro screen: title box, instructions, scoring and prompt.

    Args:
        width: Screen width to centre the text in.
        taunt: Optional taunt to show framed between the rules and prompt.
    """
    lines = _box(TITLE_LINES, width, divided=True)
    lines.append("")
    lines.extend(INSTRUCTIONS_TEXT)
    lines.append("")
    lines.extend(SCORING_TEXT)
    lines.append("")
    if taunt:
        lines.append(">" * width)
        lines.append(taunt)
        lines.append("<" * width)
    else:
        lines.extend(["", "", ""])
    lines.append("")
    lines.append(READY_PROMPT)

    return [line[:width].center(width) for line in lines]


def compose_end_screen(world: World) -> List[str]:
    """
    Build the end-of-game screen: outcome art, result, score and prompt.

    Returns:
        Lines exactly world.width characters wide, the prompt last.
    """
    if world.outcome is Outcome.WON:
        art, footer = WIN_ART, WIN_FOOTER
    elif world.outcome is Outcome.LOST:
        art, footer = LOSE_ART, LOSE_FOOTER
    else:
        art, footer = [OUTCOME_MESSAGES[world.outcome]], ""

    width = world.width
    lines = _box(art, width)
    lines.append(footer)
    lines.append("")
    lines.append(OUTCOME_MESSAGES[world.outcome])
    lines.append(f"Score: {world.score}")
    lines.append("")
    lines.append(PLAY_AGAIN_PROMPT)

    return [line[:width].center(width) for line in lines]


def _box(texts: Sequence[str], width: int, divided: bool = False) -> List[str]:
    """Frame centred text lines in a width-wide box."""
    border = "+" + "=" * (width - 2) + "+"
    lines = [border]
    for index, text in enumerate(texts):
        if divided and index:
            lines.append(border)
        lines.append("|" + text[:width - 2].center(width - 2) + "|")
    lines.append(border)
    return lines


def init_palette() -> Dict[str, int]:
    """
    Initialize colors and map glyphs to curses attributes.

    Returns:
        Glyph to attribute mapping; empty if the terminal has no colors.
    """
    if not curses.has_colors():
        return {}
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(COLOR_PLAYER, curses.COLOR_GREEN, -1)
        curses.init_pair(COLOR_ALIEN, curses.COLOR_MAGENTA, -1)
        curses.init_pair(COLOR_BULLET, curses.COLOR_WHITE, -1)
        curses.init_pair(COLOR_EXPLOSION, curses.COLOR_RED, -1)
    except curses.error as exc:
        raise TerminalSetupFailure(f"could not initialize colors: {exc}") from exc

    palette = {char: curses.color_pair(COLOR_ALIEN) for char in ALIEN_CHARS}
    palette[PLAYER_CHAR] = curses.color_pair(COLOR_PLAYER)
    palette[BULLET_CHAR] = curses.color_pair(COLOR_BULLET)
    palette[EXPLOSION_CHAR] = curses.color_pair(COLOR_EXPLOSION) | curses.A_BOLD
    return palette


def draw_screen(screen, world: World, final: bool = False,
                palette: Optional[Dict[str, int]] = None) -> None:
    """
    Draw the world over the previous frame, starting at the origin.

    Every line is full width, so nothing from the last frame survives and
    the screen never needs clearing between turns.
    """
    lines = compose_screen(world, final)
    for y, line in enumerate(lines):
        _safe_addstr(screen, y, 0, line)

    # The final frame's banner shares glyphs with the sprites; keep it plain
    if palette and not final:
        for y, line in enumerate(lines[:world.height]):
            for x, char in enumerate(line):
                attr = palette.get(char)
                if attr:
                    _safe_addstr(screen, y, x, char, attr)

    screen.move(0, 0)
    screen.refresh()


def _safe_addstr(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    """Safely add string to screen, handling boundary issues."""
    max_y, max_x = screen.getmaxyx()
    if not (0 <= y < max_y and 0 <= x < max_x):
        return
    # The bottom-right cell cannot be written without curses raising
    text = text[:max_x - x - 1]
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


# ============================================================================
# INPUT AND GAME LOOP
# ============================================================================

KEY_BINDINGS = {
    curses.KEY_LEFT: Action.MOVE_LEFT,
    ord('a'): Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    ord('d'): Action.MOVE_RIGHT,
    ord(' '): Action.FIRE,
}
QUIT_KEYS = (ord('q'), ord('Q'), KEY_ESCAPE)
YES_KEYS = (ord('y'), ord('Y'))
NO_KEYS = (ord('n'), ord('N'))


def read_command(screen) -> Optional[Union[Action, Command]]:
    """
    Block until one key is pressed and translate it.

    Returns:
        An Action, Command.QUIT, Command.REDRAW after a resize, or None for
        keys that mean nothing (those never cost a turn).
    """
    key = screen.getch()
    if key in QUIT_KEYS:
        return Command.QUIT
    if key == curses.KEY_RESIZE:
        return Command.REDRAW
    return KEY_BINDINGS.get(key)


def play_session(screen, world: World,
                 palette: Optional[Dict[str, int]] = None) -> Outcome:
    """
    Run one game: read a key, apply the turn, redraw, until the game ends.

    Returns:
        The final outcome; IN_PROGRESS means the player quit.
    """
    logger.info("Session started: %dx%d field, %d aliens",
                world.width, world.height, world.alien_count())
    draw_screen(screen, world, palette=palette)

    while not world.is_over:
        command = read_command(screen)
        if command is Command.QUIT:
            logger.info("Player quit on turn %d with score %d", world.turn, world.score)
            break
        if command is Command.REDRAW:
            screen.clear()
        elif command is None:
            continue
        else:
            apply_turn(world, command)
        draw_screen(screen, world, palette=palette)

    draw_screen(screen, world, final=True, palette=palette)
    logger.info("Session ended: %s after %d turns, score %d",
                world.outcome.name, world.turn, world.score)
    return world.outcome


def show_intro(screen, width: int = GAME_WIDTH) -> bool:
    """
    Show the intro screen until the player answers the ready prompt.
    Every 'n' is answered with the next taunt.

    Returns:
        True to start playing, False if the player quit.
    """
    taunt_index = 0
    show_taunt = False
    while True:
        taunt = TAUNT_PHRASES[taunt_index] if show_taunt else None
        screen.erase()
        for y, line in enumerate(compose_intro(width, taunt)):
            _safe_addstr(screen, y, 0, line)
        screen.refresh()

        key = screen.getch()
        if key in YES_KEYS:
            return True
        if key in NO_KEYS:
            show_taunt = True
            taunt_index = (taunt_index + 1) % len(TAUNT_PHRASES)
            logger.debug("Intro declined, taunting with #%d", taunt_index)
        elif key in QUIT_KEYS:
            return False


def ask_play_again(screen, world: World) -> bool:
    """
    Show the end screen and ask for another round.

    Returns:
        True for a new game, False to exit.
    """
    screen.erase()
    for y, line in enumerate(compose_end_screen(world)):
        _safe_addstr(screen, y, 0, line)
    screen.refresh()
    while True:
        key = screen.getch()
        if key in YES_KEYS:
            return True
        if key in NO_KEYS or key in QUIT_KEYS:
            return False


# ============================================================================
# TERMINAL SESSION
# ============================================================================

@contextmanager
def terminal_session() -> Iterator['curses.window']:
    """
    Put the terminal in cbreak/no-echo mode for the duration of the block.

    The terminal is restored on every exit path, including a failure half
    way through setup.

    Raises:
        TerminalSetupFailure: If curses cannot take over the terminal.
    """
    # Esc is a quit key; don't wait a full second to tell it from a sequence
    os.environ.setdefault('ESCDELAY', ESC_DELAY_MS)
    stdscr = None
    try:
        try:
            stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            stdscr.nodelay(False)
        except curses.error as exc:
            raise TerminalSetupFailure(f"could not initialize terminal: {exc}") from exc

        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        yield stdscr
    finally:
        if stdscr is not None:
            stdscr.keypad(False)
            curses.echo()
            curses.nocbreak()
            curses.endwin()


def check_terminal_size(screen, width: int = GAME_WIDTH, height: int = GAME_HEIGHT) -> None:
    """
    Make sure the field, status line and prompt fit on screen.

    Raises:
        TerminalSetupFailure: If the terminal is too small.
    """
    rows, cols = screen.getmaxyx()
    need_rows, need_cols = height + 2, width + 1
    if rows < need_rows or cols < need_cols:
        raise TerminalSetupFailure(
            f"terminal too small: need {need_cols}x{need_rows}, have {cols}x{rows}"
        )


def run_game(seed: Optional[int] = None, skip_intro: bool = False) -> None:
    """Acquire the terminal and play games until the player stops."""
    rng = random.Random(seed)
    with terminal_session() as stdscr:
        check_terminal_size(stdscr)
        palette = init_palette()

        while True:
            if not skip_intro and not show_intro(stdscr):
                return
            stdscr.clear()
            world = World.create(rng=rng)
            outcome = play_session(stdscr, world, palette)
            if outcome is Outcome.IN_PROGRESS:
                return
            if not ask_play_again(stdscr, world):
                return


# ============================================================================
# ENTRY POINT
# ============================================================================

def configure_logging(path: Optional[str] = None) -> logging.Handler:
    """
    Send log records to a file, never to the terminal curses is drawing on.

    Args:
        path: Log file; falls back to $ASCIILIENS_LOG. Without either,
            logging is silenced.

    Returns:
        The handler that was attached to the module logger.
    """
    path = path or os.environ.get(LOG_ENV_VAR)
    handler: logging.Handler
    if path:
        handler = logging.FileHandler(path)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    return handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciiliens",
        description="Turn-based ASCII invaders: every keypress is one turn.",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help=f"write a debug log to PATH (default: ${LOG_ENV_VAR})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="seed for the alien designs",
    )
    parser.add_argument(
        "--skip-intro",
        action="store_true",
        help="go straight to the game",
    )
    parser.add_argument(
        "-V", "--version", action="version", version="%(prog)s " + __version__
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the game."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    try:
        run_game(seed=args.seed, skip_intro=args.skip_intro)
    except TerminalSetupFailure as exc:
        logger.error("Terminal setup failed: %s", exc)
        print(f"asciiliens: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == '__main__':
    sys.exit(main())
