# -*- coding: utf-8 -*-

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    id: str
    label: str
    primary: str
    secondary: str
    accent: str
    background: str  # window background (Tk has no gradients)
    track: str  # unfilled part of the progress ring


@dataclass(frozen=True)
class DevLink:
    name: str
    url: str
