"""Offline client with fixed data, used by ``--mock`` and the tests."""

from courtside.client.base import NbaClient
from courtside.core.models import (
    Action,
    BoxScoreSnapshot,
    Game,
    GameStatus,
    PlayByPlaySnapshot,
    Player,
    PlayerStatistics,
    TeamSnapshot,
    TeamStatistics,
)

LAKERS_ID = 1610612747
WARRIORS_ID = 1610612744


class MockNbaClient(NbaClient):
    """Returns two games, one player per side and three actions."""

    def get_scoreboard(self) -> list[Game]:
        return [
            Game(
                game_id="0012300001",
                status=GameStatus.LIVE,
                status_text="Q4 2:00",
                period=4,
                clock="PT02M00.00S",
                home_team=TeamSnapshot(tricode="LAL", team_id=LAKERS_ID, score=102, name="Lakers"),
                away_team=TeamSnapshot(tricode="GSW", team_id=WARRIORS_ID, score=99, name="Warriors"),
            ),
            Game(
                game_id="0012300002",
                status=GameStatus.FINAL,
                status_text="Final",
                period=4,
                home_team=TeamSnapshot(tricode="BOS", team_id=1610612738, score=110, name="Celtics"),
                away_team=TeamSnapshot(tricode="MIA", team_id=1610612748, score=105, name="Heat"),
            ),
        ]

    def get_box_score(self, game_id: str) -> BoxScoreSnapshot:
        lebron = Player(
            first_name="LeBron",
            family_name="James",
            person_id=2544,
            statistics=PlayerStatistics(
                minutes="PT35M00.00S",
                points=30,
                rebounds=10,
                assists=8,
                field_goals_made=10,
                field_goals_attempted=20,
                field_goals_percentage=0.5,
                three_pointers_made=2,
                three_pointers_attempted=5,
                three_pointers_percentage=0.4,
                free_throws_made=8,
                free_throws_attempted=10,
                free_throws_percentage=0.8,
                rebounds_offensive=2,
                rebounds_defensive=8,
                steals=2,
                blocks=1,
                turnovers=3,
                fouls_personal=2,
                plus_minus=5.0,
            ),
        )
        curry = Player(
            first_name="Stephen",
            family_name="Curry",
            person_id=201939,
            statistics=PlayerStatistics(
                minutes="PT34M00.00S",
                points=28,
                rebounds=5,
                assists=6,
                plus_minus=-2.0,
            ),
        )
        return BoxScoreSnapshot(
            game=Game(
                game_id=game_id,
                status=GameStatus.LIVE,
                period=4,
                clock="PT02M00.00S",
                home_team=TeamSnapshot(
                    tricode="LAL",
                    team_id=LAKERS_ID,
                    score=110,
                    name="Lakers",
                    players=(lebron,),
                    statistics=TeamStatistics(minutes="PT240M00.00S", points=110, rebounds=45, assists=25),
                ),
                away_team=TeamSnapshot(
                    tricode="GSW",
                    team_id=WARRIORS_ID,
                    score=100,
                    name="Warriors",
                    players=(curry,),
                    statistics=TeamStatistics(minutes="PT240M00.00S", points=100, rebounds=40, assists=20),
                ),
            )
        )

    def get_play_by_play(self, game_id: str) -> PlayByPlaySnapshot:
        return PlayByPlaySnapshot(
            game_id=game_id,
            actions=(
                Action(1, "PT11M00.00S", 1, LAKERS_ID, "Jump Ball James vs Curry"),
                Action(2, "PT10M45.00S", 1, LAKERS_ID, "James 2pt Shot Made"),
                Action(3, "PT10M30.00S", 1, WARRIORS_ID, "Curry 3pt Shot Missed"),
            ),
        )
