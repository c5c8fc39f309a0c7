from .bot import ContrastHeroBot

__all__ = ["ContrastHeroBot"]
