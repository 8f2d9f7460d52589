import pygame

# Frames a key must be held before it starts repeating, then frames
# between repeats.
REPEAT_DELAY = 18
REPEAT_INTERVAL = 3


class InputManager:
    """Viewer key bindings with edge detection and key repeat."""

    def __init__(self):
        self.keymap = {
            "step": pygame.K_SPACE,
            "run": pygame.K_RETURN,
            "play": pygame.K_p,
            "restart": pygame.K_r,
            "next_camera": pygame.K_TAB,
            "toggle_camera": pygame.K_c,
            "quit": pygame.K_ESCAPE,
        }

        # Frames each action has been held for, 0 when up
        self.held_frames = {action: 0 for action in self.keymap}
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # UPDATE (call once per frame, after the event pump)
    # =====================================================

    def update(self):
        keys = pygame.key.get_pressed()
        for action, key in self.keymap.items():
            self.held_frames[action] = self.held_frames[action] + 1 if keys[key] else 0
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # QUERIES
    # =====================================================

    def is_pressed(self, action):
        """True only on the frame the key went down."""
        return self.held_frames.get(action, 0) == 1

    def is_repeated(self, action):
        """True on the first frame and then periodically while held."""
        held = self.held_frames.get(action, 0)
        if held == 1:
            return True
        if held <= REPEAT_DELAY:
            return False
        return (held - REPEAT_DELAY) % REPEAT_INTERVAL == 0

    def get_mouse_pos(self):
        return pygame.Vector2(self.mouse_pos)
