from typedlist.helpers.configuration import ListConfiguration

__all__ = ("ListConfiguration",)
