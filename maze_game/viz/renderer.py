import logging
import pygame
from maze_game.session import GameSession

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (68, 68, 68)  # 0x444444
    COLOR_DARK = (0, 0, 0)
    COLOR_PLAYER = (40, 110, 220)
    COLOR_GOAL = (230, 180, 20)
    COLOR_TEXT = (0, 0, 0)

    def __init__(self, session: GameSession):
        self.session = session
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        cfg = self.session.config
        self.surface = pygame.display.set_mode((cfg.viewport_width, cfg.viewport_height), pygame.RESIZABLE)
        pygame.display.set_caption("Maze Game")
        self.font = pygame.font.SysFont("Arial", 20)
        self.clock = pygame.time.Clock()

    def draw(self, surface):
        session = self.session
        grid = session.grid
        cs = session.cell_size

        surface.fill(self.COLOR_BG)

        for rect in grid.to_wall_rectangles(cs, session.config.wall_scale):
            pygame.draw.rect(surface, self.COLOR_WALL, pygame.Rect(rect.x, rect.y, rect.width, rect.height))

        goal = session.goal_rect()
        pygame.draw.rect(surface, self.COLOR_GOAL, pygame.Rect(goal.x, goal.y, goal.width, goal.height))

        player = session.player_rect()
        pygame.draw.rect(surface, self.COLOR_PLAYER, pygame.Rect(player.x, player.y, player.width, player.height))

        # Darken everything outside the light radius
        mask = session.light_mask()
        for y in range(grid.height):
            for x in range(grid.width):
                if not mask[y, x]:
                    surface.fill(self.COLOR_DARK, pygame.Rect(x * cs, y * cs, cs + 1, cs + 1))

        if self.font:
            text = self.font.render(f"Time: {session.elapsed_seconds()}s", True, self.COLOR_TEXT, self.COLOR_BG)
            surface.blit(text, (10, 10))

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.session.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    logger.info("Restarting maze...")
                    self.session.restart()
                elif event.key == pygame.K_v:
                    visible = self.session.toggle_visibility()
                    logger.info(f"Maze visibility: {'on' if visible else 'off'}")

    def run_loop(self):
        while self.running:
            self.handle_events()
            if self.session.reached_goal():
                self.session.complete()
            self.draw(self.surface)
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
