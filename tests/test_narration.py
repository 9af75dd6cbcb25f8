from __future__ import annotations

import pytest

from superheroes.models import Combatant
from superheroes.narration import (
    MAX_STORY_LENGTH,
    narrate_battle,
    pick_winner,
    truncate_story,
)

from hero_helpers import make_hero


def test_dominant_example(a_bomb, ant_man) -> None:
    assert a_bomb.total_power == 323
    assert ant_man.total_power == 233

    story = narrate_battle(a_bomb, ant_man)

    assert "A-Bomb" in story
    assert "Ant-Man" in story
    assert len(story) <= MAX_STORY_LENGTH
    assert "A-Bomb completely dominated the fight!" in story
    assert "(323 vs 233)" in story
    # strength 100 vs 18 qualifies; combat 64 vs 32 too; speed 17 vs 23 doesn't
    assert "showcased superior strength, combat. " in story
    assert "Ant-Man never stood a chance" in story


def test_dominant_winner_can_be_second_hero(a_bomb, ant_man) -> None:
    story = narrate_battle(ant_man, a_bomb)
    assert story.startswith("In an epic battle between Ant-Man and A-Bomb, ")
    assert "A-Bomb completely dominated the fight!" in story


def test_dominant_falls_back_when_no_stat_stands_out() -> None:
    winner = make_hero(1, "Brain", 50, intelligence=100, power=100)
    loser = make_hero(2, "Brawn", 40)
    assert winner.total_power - loser.total_power >= 50

    story = narrate_battle(winner, loser)
    assert "showcased superior abilities across the board. " in story


def test_dominant_stat_margin_must_exceed_twenty() -> None:
    winner = make_hero(1, "Edge", 50, strength=70, intelligence=100)
    loser = make_hero(2, "Line", 50)
    # strength wins by exactly 20, which does not count
    story = narrate_battle(winner, loser)
    assert "abilities across the board" in story
    assert "strength" not in story


def test_exact_tie_is_evenly_matched_and_favors_hero1() -> None:
    hero1 = make_hero(1, "Hero A")
    hero2 = make_hero(2, "Hero B")

    story = narrate_battle(hero1, hero2)

    assert "evenly matched" in story
    assert "Hero A (power: 300) traded fierce blows with Hero B (power: 300)" in story
    assert "Hero A emerged victorious by the narrowest of margins" in story


def test_small_difference_is_evenly_matched() -> None:
    hero1 = make_hero(1, "Hero A")
    hero2 = make_hero(2, "Hero B", 50, intelligence=55, strength=45, combat=69)
    assert abs(hero1.total_power - hero2.total_power) == 19

    story = narrate_battle(hero1, hero2)
    assert "evenly matched" in story
    assert "Hero B emerged victorious" in story


@pytest.mark.parametrize("diff,tier_phrase", [(20, "clear advantage"), (49, "clear advantage"), (50, "dominated")])
def test_tier_boundaries(diff: int, tier_phrase: str) -> None:
    hero1 = make_hero(1, "Hero A", 50, combat=50 + diff)
    hero2 = make_hero(2, "Hero B")
    assert tier_phrase in narrate_battle(hero1, hero2)


def test_clear_advantage_cites_top_stat_and_total() -> None:
    winner = make_hero(1, "Cyclops", 50, speed=80)
    loser = make_hero(2, "Toad", 50)

    story = narrate_battle(loser, winner)

    assert "Cyclops held a clear advantage with superior abilities." in story
    assert "Despite Toad's valiant effort, Cyclops's combination of speed (80) and overall power (330)" in story
    assert "Toad fought bravely but was ultimately overwhelmed." in story


def test_clear_advantage_top_stat_tie_uses_first_in_order() -> None:
    winner = make_hero(1, "Twins", 50, strength=70, combat=70)
    loser = make_hero(2, "Solo")

    story = narrate_battle(winner, loser)
    assert "combination of strength (70)" in story


def test_story_is_deterministic(a_bomb, ant_man) -> None:
    assert narrate_battle(a_bomb, ant_man) == narrate_battle(a_bomb, ant_man)


def test_long_names_are_truncated_to_limit() -> None:
    hero1 = Combatant(name="X" * 500, powerstats=make_hero(1, "x").powerstats)
    hero2 = Combatant(name="Y" * 500, powerstats=make_hero(2, "y", 10).powerstats)

    story = narrate_battle(hero1, hero2)

    assert len(story) == MAX_STORY_LENGTH
    assert story.endswith("...")


def test_truncate_story_leaves_short_text_alone() -> None:
    assert truncate_story("short") == "short"
    assert truncate_story("x" * 800) == "x" * 800
    assert truncate_story("x" * 801) == "x" * 797 + "..."


def test_pick_winner_prefers_hero1_on_ties() -> None:
    hero1 = make_hero(1, "First")
    hero2 = make_hero(2, "Second")
    assert pick_winner(hero1, hero2) == (hero1, hero2)
    assert pick_winner(hero2, hero1) == (hero2, hero1)


def test_story_contains_both_names_across_tiers(heroes) -> None:
    for hero1 in heroes:
        for hero2 in heroes:
            story = narrate_battle(hero1, hero2)
            assert hero1.name in story
            assert hero2.name in story
            assert len(story) <= MAX_STORY_LENGTH
