import enum
import logging
import time

from tuitris.board import GameBoard
from tuitris.config import GRAVITY_RATE, INPUT_RATE, KEYBINDS, LOGGER_NAME, LOOP_RATE, POLL_TIMEOUT
from tuitris.render import make_frame
from tuitris.screen import KEY_RESIZE
from tuitris.tetromino import MoveDirection

logger = logging.getLogger(LOGGER_NAME)


class Action(enum.Enum):
    QUIT = "quit"
    LOCK_AND_SPAWN = "lock"
    MOVE = "move"


COMMANDS = {
    "quit": (Action.QUIT, None),
    "lock": (Action.LOCK_AND_SPAWN, None),
    "left": (Action.MOVE, MoveDirection.LEFT),
    "right": (Action.MOVE, MoveDirection.RIGHT),
    "down": (Action.MOVE, MoveDirection.DOWN),
    "rotate_ccw": (Action.MOVE, MoveDirection.CCW),
    "rotate_cw": (Action.MOVE, MoveDirection.CW),
}


def map_key(key, keybinds=None):
    if keybinds is None:
        keybinds = KEYBINDS
    name = keybinds.get(key)
    if name is None:
        return None
    return COMMANDS[name]


class App:
    def __init__(self, board=None, rng=None, input_rate=INPUT_RATE, loop_rate=LOOP_RATE,
                 gravity_rate=GRAVITY_RATE, poll_timeout=POLL_TIMEOUT,
                 clock=time.monotonic, sleep=time.sleep):
        self.board = board if board is not None else GameBoard()
        self.rng = rng
        self.should_quit = False
        self.frames = 0

        self.input_rate = input_rate
        self.loop_rate = loop_rate
        self.gravity_rate = gravity_rate
        self.poll_timeout = poll_timeout
        self.clock = clock
        self.sleep = sleep

        now = clock()
        self.last_input_check = now
        self.last_gravity_update = now
        self.needs_redraw = True

    # ============= ACTIONS =============

    def apply(self, action, direction=None):
        ap = self.board.active_piece
        if action == Action.QUIT:
            self.should_quit = True
        elif action == Action.LOCK_AND_SPAWN:
            if ap is not None:
                new = self.board.lock_and_spawn(rng=self.rng)
                logger.debug("locked %s at (%d, %d), spawned %s",
                             ap.tetromino.shape.value, ap.pos.x, ap.pos.y, new.tetromino.shape.value)
        elif action == Action.MOVE:
            if ap is None:
                return
            if direction in (MoveDirection.CW, MoveDirection.CCW):
                self.board.active_piece = ap.rotated(direction)
            else:
                self.board.active_piece = ap.moved(direction, self.board.size)
                if direction == MoveDirection.DOWN:
                    self.last_gravity_update = self.clock()
            logger.debug("%s -> pos=(%d, %d) rot=%s", direction.value,
                         self.board.active_piece.pos.x, self.board.active_piece.pos.y,
                         self.board.active_piece.tetromino.rotation.name)

    def gravity_step(self):
        ap = self.board.active_piece
        if ap is not None:
            # no landing check: the piece keeps falling past the floor
            self.board.active_piece = ap.moved(MoveDirection.DOWN, self.board.size)
            logger.debug("gravity -> y=%d", self.board.active_piece.pos.y)

    # ============= LOOP =============

    def reset_timers(self):
        now = self.clock()
        self.last_input_check = now
        self.last_gravity_update = now
        self.needs_redraw = True

    def handle_input(self, screen):
        key = screen.poll_key(self.poll_timeout)
        self.last_input_check = self.clock()
        if key is None:
            return
        if key == KEY_RESIZE:
            self.needs_redraw = True
            return
        command = map_key(key)
        if command is None:
            return
        self.apply(*command)
        self.needs_redraw = True

    def draw(self, screen):
        buf = screen.new_buffer()
        make_frame(self, buf)
        screen.draw(buf)
        self.frames += 1

    def run_iteration(self, screen):
        """One pass of input, gravity and redraw. Returns when it started."""
        loop_start = self.clock()

        if loop_start - self.last_input_check >= self.input_rate:
            self.handle_input(screen)

        if self.clock() - self.last_gravity_update >= self.gravity_rate:
            self.gravity_step()
            self.last_gravity_update = self.clock()
            self.needs_redraw = True

        if self.needs_redraw:
            self.draw(screen)
            self.needs_redraw = False

        return loop_start

    def game_loop(self, screen):
        self.reset_timers()
        logger.info("game loop started")
        while True:
            loop_start = self.run_iteration(screen)
            if self.should_quit:
                break
            remaining = self.loop_rate - (self.clock() - loop_start)
            if remaining > 0:
                self.sleep(remaining)
        logger.info("game loop stopped after %d frames", self.frames)
