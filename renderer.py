import pygame

def render_frame(screen: pygame.Surface, surf: pygame.Surface, sar: float = 1.0):
    """
    Scale and letter-/pillar-box a frame surface onto `screen`.
    """
    sw, sh = screen.get_size()
    vw, vh = surf.get_size()
    scale = min(sw / (vw * sar), sh / vh)
    size = (int(vw * scale * sar), int(vh * scale))
    if size != (vw, vh):
        surf = pygame.transform.scale(surf, size)
    screen.fill((0,0,0))
    x = (sw - surf.get_width()) // 2
    y = (sh - surf.get_height()) // 2
    screen.blit(surf, (x, y))
