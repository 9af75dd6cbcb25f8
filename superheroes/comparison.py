"""
Stat-by-stat head-to-head comparison of two heroes.

Unlike the battle story, which only looks at total power, this counts how
many of the six categories each hero wins outright.
"""

from .models import STAT_ORDER, Combatant, HeadToHead, StatResult


def compare_stats(hero1: Combatant, hero2: Combatant) -> HeadToHead:
    """
    Compare two combatants category by category.

    A category (or the overall total) is only won by a strictly greater
    value; equal values are a tie and count for neither hero.
    """
    results = []
    hero1_wins = 0
    hero2_wins = 0

    for stat in STAT_ORDER:
        v1 = hero1.powerstats.value(stat)
        v2 = hero2.powerstats.value(stat)
        if v1 > v2:
            winner = hero1.name
            hero1_wins += 1
        elif v2 > v1:
            winner = hero2.name
            hero2_wins += 1
        else:
            winner = None
        results.append(StatResult(stat=stat, hero1_value=v1, hero2_value=v2, winner=winner))

    if hero1_wins > hero2_wins:
        category_winner = hero1.name
    elif hero2_wins > hero1_wins:
        category_winner = hero2.name
    else:
        category_winner = None

    total1 = hero1.total_power
    total2 = hero2.total_power
    if total1 > total2:
        overall_winner = hero1.name
    elif total2 > total1:
        overall_winner = hero2.name
    else:
        overall_winner = None

    return HeadToHead(
        hero1=hero1.name,
        hero2=hero2.name,
        stats=results,
        hero1_wins=hero1_wins,
        hero2_wins=hero2_wins,
        score=f"{max(hero1_wins, hero2_wins)}-{min(hero1_wins, hero2_wins)}",
        category_winner=category_winner,
        hero1_total=total1,
        hero2_total=total2,
        overall_winner=overall_winner,
    )


def format_head_to_head(result: HeadToHead) -> str:
    """Render a comparison as a plain-text bulleted report."""
    lines = [f"Comparison between {result.hero1} and {result.hero2}:", ""]
    for entry in result.stats:
        lines.append(
            f"• {entry.stat.value.capitalize()}: "
            f"{result.hero1} ({entry.hero1_value}) vs {result.hero2} ({entry.hero2_value}) "
            f"- Winner: {entry.winner or 'Tie'}"
        )
    lines.append("")
    lines.append(f"Categories won: {result.score} ({result.category_winner or 'Tie'})")
    lines.append(f"Total Stats: {result.hero1} ({result.hero1_total}) vs {result.hero2} ({result.hero2_total})")
    lines.append(f"Overall Winner: {result.overall_winner or 'Tie'}")
    return "\n".join(lines)
