"""Animals that speak, dispatched by overriding or by checking types."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import ClassVar


class Language(Enum):
    """Language in which animals make their sounds."""

    EN = "en"
    PL = "pl"


class Animal(ABC):
    """An animal that can breathe and speak."""

    sounds: ClassVar[dict[Language, str]] = {}

    def __init__(self, language: Language = Language.EN) -> None:
        self.language = language
        self.breaths = 0

    @property
    def sound(self) -> str:
        """The sound this animal makes in its language."""
        return self.sounds[self.language]

    def _make_sound(self) -> str:
        sound = self.sound
        print(sound)
        return sound

    def breathe(self) -> int:
        """Take one breath and return how many have been taken so far."""
        self.breaths += 1
        return self.breaths

    @abstractmethod
    def speak(self) -> str:
        """Print the animal's sound and return it."""


class Dog(Animal):
    sounds = {Language.EN: "woof!", Language.PL: "hau!"}

    def bark(self) -> str:
        return self._make_sound()

    def speak(self) -> str:
        return self.bark()


class Cat(Animal):
    sounds = {Language.EN: "meow!", Language.PL: "miau!"}

    def meow(self) -> str:
        return self._make_sound()

    def speak(self) -> str:
        return self.meow()


class Pig(Animal):
    sounds = {Language.EN: "oink!", Language.PL: "chrum!"}

    def oink(self) -> str:
        return self._make_sound()

    def speak(self) -> str:
        return self.oink()


class Sparrow(Animal):
    sounds = {Language.EN: "tweet!", Language.PL: "cwir!"}

    def tweet(self) -> str:
        return self._make_sound()

    def speak(self) -> str:
        return self.tweet()


def voice(animal: Animal) -> None:
    """Let the animal speak through its own override."""
    animal.speak()


def voice_by_type(animal: Animal) -> None:
    """Let the animal speak by checking its type; unknown kinds stay silent."""
    if isinstance(animal, Dog):
        animal.bark()
    elif isinstance(animal, Cat):
        animal.meow()
    elif isinstance(animal, Pig):
        animal.oink()
    elif isinstance(animal, Sparrow):
        animal.tweet()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Let a few animals speak.")
    parser.add_argument(
        "--lang", choices=[language.value for language in Language], default="en"
    )
    parser.add_argument(
        "--dispatch", choices=["virtual", "type"], default="virtual"
    )
    args = parser.parse_args(argv)

    language = Language(args.lang)
    speak = voice if args.dispatch == "virtual" else voice_by_type
    for animal in (Dog(language), Cat(language), Pig(language), Sparrow(language)):
        speak(animal)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())