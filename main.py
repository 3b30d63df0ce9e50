import logging
import math
import sys

import pygame

from config import Settings
from game_loop import STATE_WON, GameLoop, GameState

logger = logging.getLogger(__name__)

BACKGROUND = (220, 220, 220)
COLORS = [(255, 255, 255), (255, 0, 0), (0, 0, 255)]
SLOT_SIZE = 50
PIECE_RADIUS = 20
ORBIT_PIECE_RADIUS = 25


def slot_center(center, radius, angle):
    cx, cy = center
    return (round(cx + radius * math.cos(angle)), round(cy + radius * math.sin(angle)))


class GameClient:
    def __init__(self, settings):
        self.settings = settings
        self.loop = GameLoop(GameState(settings.slots, settings.speed), settings.debounce_ms)
        self.screen = None
        self.font = None
        self.small_font = None
        self.center = (settings.window // 2, settings.window // 2)
        self.btn_reset = None

    def draw_board(self, state):
        angle_step = 2 * math.pi / len(state.board)
        for i, owner in enumerate(state.board.slots):
            angle = i * angle_step
            pos = slot_center(self.center, self.settings.radius, angle)
            # each slot is a square turned to face the centre
            square = pygame.Surface((SLOT_SIZE, SLOT_SIZE), pygame.SRCALPHA)
            pygame.draw.rect(square, COLORS[0], square.get_rect())
            pygame.draw.rect(square, (0, 0, 0), square.get_rect(), 1)
            square = pygame.transform.rotate(square, -math.degrees(angle))
            self.screen.blit(square, square.get_rect(center=pos))
            if owner:
                pygame.draw.circle(self.screen, COLORS[owner], pos, PIECE_RADIUS)

    def draw_orbit_piece(self, state):
        pos = slot_center(self.center, self.settings.radius, state.cursor.angle)
        pygame.draw.circle(self.screen, COLORS[state.current_player], pos, ORBIT_PIECE_RADIUS)
        pygame.draw.circle(self.screen, (0, 0, 0), pos, ORBIT_PIECE_RADIUS, 1)

    def draw_status(self, state):
        cx, cy = self.center
        color = (0, 0, 0) if state.phase == STATE_WON else COLORS[state.current_player]
        txt = self.font.render(state.status_text(), True, color)
        self.screen.blit(txt, (cx - txt.get_width() // 2, cy - txt.get_height() // 2))

    def draw_reset_button(self):
        cx, cy = self.center
        btn = pygame.Rect(cx - 80, cy + self.settings.radius + 60, 160, 50)
        pygame.draw.rect(self.screen, (0, 120, 255), btn)
        label = self.small_font.render('Reset', True, (255, 255, 255))
        self.screen.blit(label, (btn.centerx - label.get_width() // 2, btn.centery - label.get_height() // 2))
        return btn

    def draw(self):
        state = self.loop.state
        self.screen.fill(BACKGROUND)
        self.draw_board(state)
        if state.phase != STATE_WON:
            self.draw_orbit_piece(state)
        self.draw_status(state)
        if state.phase == STATE_WON or state.is_draw:
            self.btn_reset = self.draw_reset_button()
        else:
            self.btn_reset = None

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.loop.handle_place(pygame.time.get_ticks())
            elif event.key == pygame.K_r:
                self.loop.reset()
        if event.type == pygame.MOUSEBUTTONDOWN and self.btn_reset is not None:
            if self.btn_reset.collidepoint(event.pos):
                self.loop.reset()
        return True

    def run(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.settings.window, self.settings.window))
        pygame.display.set_caption('Orbit Connect Four')
        self.font = pygame.font.SysFont('Arial', 32)
        self.small_font = pygame.font.SysFont('Arial', 24)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            # a winning tick freezes the cursor before this frame is drawn
            self.loop.tick()
            self.draw()
            pygame.display.flip()
            clock.tick(self.settings.fps)
        logger.info("Shutting down")
        pygame.quit()


def main(argv=None):
    settings = Settings.from_args(argv)
    logging.basicConfig(level=settings.log_level, format='[%(asctime)s] %(levelname)s: %(message)s')
    GameClient(settings).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
