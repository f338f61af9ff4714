"""Catalogue of the asset files the game loads before the menu appears."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class AssetCollection:
    """A named group of assets, each key mapped to a path under the asset root."""

    name: str
    assets: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, key: str) -> str:
        return self.assets[key]

    def __len__(self) -> int:
        return len(self.assets)


FONT_ASSETS = AssetCollection(
    "fonts",
    {
        "fira_sans": "fonts/FiraSans-Bold.ttf",
        "gothic": "fonts/GothicPixels.ttf",
        "gothic_pxl": "fonts/gothic-pixel-font.ttf",
        "garamond": "fonts/EBGaramond-MediumItalic.TTF",
    },
)

AUDIO_ASSETS = AssetCollection(
    "audio",
    {
        "flying": "audio/flying.ogg",
        "levelup": "audio/levelup.ogg",
        "big_crystal": "audio/big_crystal.ogg",
        "coin": "audio/coin.ogg",
        "vial": "audio/vial.ogg",
        "gunshot": "audio/gunshot.ogg",
        "gunshot2": "audio/gunshot_2.ogg",
        "grunt": "audio/grunt.ogg",
        "reaper_death": "audio/reaper_death.ogg",
        "blade": "audio/blade.ogg",
        "reload": "audio/reload.ogg",
        "reload_done": "audio/reload_done.ogg",
        "beholder_death": "audio/beholder_death.ogg",
        "beholder_prince_death": "audio/beholder_prince_death.ogg",
        "fireball": "audio/fireball.ogg",
        "explosion": "audio/explosion.ogg",
        "imp_death": "audio/imp_death.ogg",
        "imp_death2": "audio/imp_death2.ogg",
        "imp_death3": "audio/imp_death3.ogg",
        "imp_death4": "audio/imp_death4.ogg",
        "theme": "audio/theme.ogg",
    },
)

TEXTURE_ASSETS = AssetCollection(
    "textures",
    {
        "bevy": "textures/bevy.png",
        "bar": "textures/ui/bar.png",
        "next_button": "textures/ui/next_button.png",
        "flame": "textures/Flame.png",
        "explosion": "textures/explosion.png",
        "thorns": "textures/thorns.png",
        "fire": "textures/fire.png",
        "hit": "textures/hit.png",
        "bullet_small": "textures/bullet_small.png",
        "bullet_medium": "textures/bullet_medium.png",
        "bullet_large": "textures/bullet_large.png",
        "imp": "textures/enemies/imp.png",
        "imp_queen": "textures/enemies/imp_mother.png",
        "beholder": "textures/enemies/beholder.png",
        "beholder_prince": "textures/enemies/beholder_prince.png",
        "beholder_projectile": "textures/enemies/beholder_projectile.png",
        "reaper": "textures/enemies/reaper.png",
        "reaper_blade": "textures/enemies/reaper_blade.png",
        "healthbar": "textures/healthbar.png",
        "hatman": "textures/hatman_spritesheet.png",
        "bullet_ui": "textures/ui/bullet_ui.png",
        "vial": "textures/ui/vial.png",
        "xp_bar": "textures/ui/xp_bar.png",
        "reload_ui": "textures/ui/reload.png",
        "heart_ui": "textures/ui/health.png",
        "crystal": "textures/crystal.png",
        "big_crystal": "textures/big_crystal.png",
    },
)

ABILITY_TEXTURES = AssetCollection(
    "abilities",
    {
        "frame": "textures/abilities/frame.png",
        "big_bullets": "textures/abilities/big_bullets.png",
        "biggest_bullets": "textures/abilities/biggest_bullets.png",
        "bullets_galore": "textures/abilities/bullets_galore.png",
        "crossbow": "textures/abilities/crossbow.png",
        "deathrattle": "textures/abilities/deathrattle.png",
        "double_barrel": "textures/abilities/double_barrel.png",
        "potion": "textures/abilities/potion.png",
        "piercing": "textures/abilities/piercing.png",
        "max_hp": "textures/abilities/max_hp.png",
        "faster": "textures/abilities/faster.png",
        "triple_barrel": "textures/abilities/triple_barrel.png",
        "flaming_bullets": "textures/abilities/flaming_bullets.png",
        "hotter_fire": "textures/abilities/hotter_fire.png",
        "magnet": "textures/abilities/magnet.png",
        "medium_bullets": "textures/abilities/medium_bullets.png",
        "reload": "textures/abilities/reload.png",
        "shooting_speed": "textures/abilities/shooting_speed.png",
        "sixfold": "textures/abilities/sixfold.png",
        "thorns": "textures/abilities/thorns.png",
        "shells": "textures/abilities/shells.png",
        "sniper": "textures/abilities/sniper.png",
        "shotgun": "textures/abilities/shotgun.png",
        "bloodthirsty_vial": "textures/abilities/bloodthirsty_vial.png",
        "mega_shotgun": "textures/abilities/mega_shotgun.png",
    },
)

DEBUG_TEXTURE_ASSETS = AssetCollection(
    "debug_textures",
    {
        "circle": "textures/debug/circle_128.png",
        "rect": "textures/debug/rect_128.png",
    },
)


def all_collections() -> list[AssetCollection]:
    """Every collection, in the order they are loaded."""
    return [
        FONT_ASSETS,
        AUDIO_ASSETS,
        TEXTURE_ASSETS,
        ABILITY_TEXTURES,
        DEBUG_TEXTURE_ASSETS,
    ]


def missing_assets(root: str | Path) -> list[str]:
    """Relative paths of assets not present as files under ``root``."""
    base = Path(root)
    return [
        path
        for collection in all_collections()
        for path in collection.assets.values()
        if not (base / path).is_file()
    ]