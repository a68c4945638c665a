"""Domain enumerations."""

from enum import Enum, auto


class ImageClass(Enum):
    """Machine image classification."""

    MACHINE = auto()  # bootable image
    KERNEL = auto()  # kernel image for paravirtual boot
    RAMDISK = auto()  # initial ramdisk


class MatchMode(Enum):
    """Combination policy for soft criteria.

    Hard criteria (image class, account) are enforced in both modes.
    """

    ALL = auto()  # conjunctive: every configured criterion must match
    ANY = auto()  # disjunctive: one matching soft criterion suffices


class CriterionKind(Enum):
    """Evaluation behaviour of a criterion."""

    HARD = auto()  # failure rejects, regardless of mode
    SOFT = auto()  # takes part in ALL/ANY combination


class Verdict(Enum):
    """Outcome of a single evaluation stage."""

    PASS_CONTINUE = auto()  # go on to next stage
    FAIL_NOW = auto()  # reject immediately
    SUCCEED_NOW = auto()  # accept immediately
