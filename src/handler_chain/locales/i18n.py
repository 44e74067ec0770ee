import gettext as gt
from typing import Type, TypeVar

from ..constants import LOCALE_DOMAIN, LOCALE_PATH

T = TypeVar('T')


class I18n:
    __instance = None

    def __init__(self, locale: str = "en"):
        self.set_locale(locale)

    @classmethod
    def get_instance(cls: Type[T]) -> T:
        if not I18n.__instance:
            I18n.__instance = I18n()
        return I18n.__instance

    @property
    def locale(self) -> str:
        return self.__locale

    def set_locale(self, locale: str):
        # Missing catalogues fall back to the untranslated source strings
        self.__locale = locale
        self.__translation = gt.translation(LOCALE_DOMAIN, localedir=LOCALE_PATH, languages=[locale], fallback=True)

    def gettext(self, message: str) -> str:
        return self.__translation.gettext(message)


def gettext(message: str) -> str:
    return I18n.get_instance().gettext(message)
