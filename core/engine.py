import pygame
from .event_bus import EventBus
from .resource_manager import ResourceManager
from systems.logger import GameLogger
from settings import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, BG_COLOR

class GameEngine:
    def __init__(self):
        pygame.init()

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.running = True

        # Core Modules
        self.logger = GameLogger.get_instance()
        self.event_bus = EventBus()
        self.resource_manager = ResourceManager.get_instance()

        # State Machine (main에서 주입)
        self.state_machine = None

    def set_state_machine(self, state_machine):
        self.state_machine = state_machine

    def run(self):
        if not self.state_machine:
            raise RuntimeError("State Machine not initialized!")

        self.logger.info("ENGINE", f"Started ({SCREEN_WIDTH}x{SCREEN_HEIGHT} @ {FPS}fps)")
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0  # 밀리초 -> 초
            self._handle_events()
            self._update(dt)
            self._draw()

        self.logger.info("ENGINE", "Stopped")
        pygame.quit()

    def stop(self):
        self.running = False

    def _handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.stop()
            return

        # ESC = 종료
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.stop()
            return

        if self.state_machine and self.state_machine.current_state:
            self.state_machine.current_state.handle_event(event)

    def _update(self, dt):
        if self.state_machine:
            self.state_machine.update(dt)

    def _draw(self):
        self.screen.fill(BG_COLOR)

        if self.state_machine:
            self.state_machine.draw(self.screen)

        pygame.display.flip()
