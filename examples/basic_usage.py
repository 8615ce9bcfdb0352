"""Basic usage examples for the Jolpica F1 client."""

from jolpica_f1 import JolpicaClient, StandingsType


def main() -> None:
    with JolpicaClient() as f1:
        # Get the 2024 calendar
        print("=== 2024 Schedule ===")
        races = f1.schedule(2024)
        for race in races[:5]:
            print(f"  R{race.round} {race.race_name} - {race.date} ({race.country})")

        if not races:
            print("  No races found.")
            return

        # Driver standings after the opening round
        print(f"\n=== Driver standings after {races[0].race_name} ===")
        standings = f1.driver_standings(2024, races[0].round)
        if standings is None:
            print("  Standings not published yet.")
            return
        for row in standings.driver_standings[:10]:
            print(f"  P{row.position} {row.driver.code} - {row.points} pts, {row.wins} wins")

        # Constructor standings for the same round
        print(f"\n=== Constructor standings after {races[0].race_name} ===")
        teams = f1.standings(2024, races[0].round, StandingsType.CONSTRUCTOR)
        for row in (teams.constructor_standings if teams else []):
            print(f"  P{row.position} {row.constructor.name} - {row.points} pts")


if __name__ == "__main__":
    main()
