import argparse

import questionary

from game_roster.models.character import Character
from game_roster.models.team import Team


def load_character_pool():
    return [
        Character(name="Legolas", type="Bowman"),
        Character(name="Aragorn", type="Swordsman"),
        Character(name="Gandalf", type="Magician"),
        Character(name="Balrog", type="Daemon"),
        Character(name="Nazgul", type="Undead"),
        Character(name="Walker", type="Zombie"),
    ]


def select_characters(pool, take_all=False):
    if take_all:
        return pool

    label_to_character = {
        f"{character.name} ({character.type})": character for character in pool
    }
    selected_labels = questionary.checkbox(
        "Select your team:",
        choices=list(label_to_character),
    ).ask()

    # ask() returns None when the prompt is cancelled
    return [label_to_character[label] for label in selected_labels or []]


def print_team(team):
    if not len(team):
        print("⚠️ Team is empty.")
        return

    print(f"\n✅ Team ({len(team)} members):")
    for character in team:
        print(
            f"  {character.name:<10} {character.type:<10} "
            f"lvl {character.level}  hp {character.health}  "
            f"atk {character.attack}  def {character.defence}"
        )


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--all", action="store_true", help="Put every character in the pool on the team")
    args = parser.parse_args()

    team = Team()
    team.add_all(*select_characters(load_character_pool(), take_all=args.all))
    print_team(team)
