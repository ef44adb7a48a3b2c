from __future__ import annotations

import pygame

CARD_GAP = 10


def clamp_rect(
    container: pygame.Rect,
    min_w: int,
    min_h: int,
    max_w: int,
    max_h: int,
) -> pygame.Rect:
    width = max(min_w, min(max_w, container.width - 24))
    height = max(min_h, min(max_h, container.height - 24))
    rect = pygame.Rect(0, 0, width, height)
    rect.center = container.center
    return rect


def split_columns(container: pygame.Rect, widths: list[float], gap: int = 0) -> list[pygame.Rect]:
    if not widths:
        return []
    total_weight = sum(widths)
    usable = container.width - gap * (len(widths) - 1)
    x = container.left
    rects: list[pygame.Rect] = []
    for index, weight in enumerate(widths):
        if index == len(widths) - 1:
            width = container.right - x
        else:
            width = int(usable * (weight / total_weight))
        rects.append(pygame.Rect(x, container.top, width, container.height))
        x += width + gap
    return rects


def split_rows(container: pygame.Rect, heights: list[float], gap: int = 0) -> list[pygame.Rect]:
    if not heights:
        return []
    total_weight = sum(heights)
    usable = container.height - gap * (len(heights) - 1)
    y = container.top
    rects: list[pygame.Rect] = []
    for index, weight in enumerate(heights):
        if index == len(heights) - 1:
            height = container.bottom - y
        else:
            height = int(usable * (weight / total_weight))
        rects.append(pygame.Rect(container.left, y, container.width, height))
        y += height + gap
    return rects


def stack_rows(container: pygame.Rect, heights: list[int], gap: int = CARD_GAP) -> list[pygame.Rect]:
    rects: list[pygame.Rect] = []
    y = container.top
    for idx, height in enumerate(heights):
        rects.append(pygame.Rect(container.left, y, container.width, max(0, height)))
        y += height
        if idx < len(heights) - 1:
            y += gap
    return rects
