import pygame
import sys
from primeroids.audio import SoundBank
from primeroids.entities import Controls
from primeroids.render import Renderer, SUBSCRIPTION_KEYS
from primeroids.session import GameSession, Phase
# Import config module with alias
import primeroids.config as cfg

SUBSCRIPTION_KEYCODES = {getattr(pygame, f"K_{key}"): kind for key, kind in SUBSCRIPTION_KEYS}

def read_controls():
    keys = pygame.key.get_pressed()
    return Controls(
        turn_left=keys[pygame.K_a] or keys[pygame.K_LEFT],
        turn_right=keys[pygame.K_d] or keys[pygame.K_RIGHT],
        thrust=keys[pygame.K_w] or keys[pygame.K_UP],
    )

def handle_key(session, key):
    phase = session.phase
    if key == pygame.K_SPACE:
        session.toggle_mode()
    elif key == pygame.K_ESCAPE:
        session.toggle_pause()
    elif key == pygame.K_q:
        session.quit_mission()
    elif key == pygame.K_RETURN:
        if phase == Phase.TUTORIAL_BRIEFING:
            session.dismiss_tutorial()
        else:
            session.start_mission()
    elif key == pygame.K_s:
        session.sell_company()
    elif key == pygame.K_r:
        session.play_again()
    elif key in SUBSCRIPTION_KEYCODES:
        session.toggle_subscription(SUBSCRIPTION_KEYCODES[key])

def main():
    # Initialize pygame, mixer first so synthesized tones match its sample format
    pygame.mixer.pre_init(22050, -16, 1)
    pygame.init()
    screen = pygame.display.set_mode((cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT))
    # Use config alias for window caption
    pygame.display.set_caption(cfg.WINDOW_CAPTION)
    clock = pygame.time.Clock()

    session = GameSession((cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT), sound=SoundBank())
    renderer = Renderer(screen)

    # Start with training
    session.start_tutorial()

    # Game loop
    running = True
    while running:
        # Use config alias; tick() clamps long frames
        dt = clock.tick(cfg.TARGET_FPS) / 1000.0

        # Process events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                handle_key(session, event.key)

        session.tick(dt, read_controls())
        renderer.draw(session)

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
