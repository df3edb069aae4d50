"""Tests for the box score table."""

from courtside.core.models import Player, PlayerStatistics, TeamSnapshot
from courtside.ui.render.box_score import NO_PLAYER_DATA, TABLE_WIDTH, render_box_score
from courtside.ui.theme import DisplayOptions


def plain(lines):
    return [line.plain for line in lines]


class TestTable:
    """Tests for table structure."""

    def test_table_width(self):
        """21 columns, single-space separated."""
        assert TABLE_WIDTH == 106

    def test_header_rule_rows_and_totals(self, box_score, theme, options):
        lines = render_box_score(box_score.game.home_team, 200, 10, 0, 0, theme, options)
        rows = plain(lines)
        assert len(rows) == 10
        assert rows[0].startswith("PLAYER")
        assert set(rows[1]) == {"─"}
        assert rows[2].startswith("L.James")
        assert rows[3:8] == [""] * 5
        assert set(rows[8]) == {"─"}
        assert rows[9].startswith("TOTAL")

    def test_player_row_values(self, box_score, theme, options):
        row = render_box_score(box_score.game.home_team, 200, 10, 0, 0, theme, options)[2].plain
        assert row[16:21] == "35:00"
        assert row.split()[-4:] == ["3", "2", "30", "5"]
        assert "50.0" in row

    def test_total_row(self, box_score, theme, options):
        row = render_box_score(box_score.game.home_team, 200, 10, 0, 0, theme, options)[-1].plain
        assert row[16:21] == "240:0"
        assert row.endswith("-")

    def test_no_roster(self, theme, options):
        lines = render_box_score(TeamSnapshot(tricode="LAL"), 80, 10, 0, 0, theme, options)
        assert plain(lines) == [NO_PLAYER_DATA]

    def test_player_without_statistics(self, theme, options):
        team = TeamSnapshot(players=(Player(first_name="Draymond", family_name="Green"),))
        row = render_box_score(team, 200, 10, 0, 0, theme, options)[2].plain
        assert row.startswith("D.Green")
        assert row[16:17] == "-"
        assert row[17:].strip() == ""

    def test_short_pane_keeps_total_row(self, box_score, theme, options):
        """Without room for the separator, TOTAL still follows the header rule."""
        rows = plain(render_box_score(box_score.game.home_team, 200, 3, 0, 0, theme, options))
        assert len(rows) == 3
        assert rows[0].startswith("PLAYER")
        assert set(rows[1]) == {"─"}
        assert rows[2].startswith("TOTAL")

    def test_without_team_statistics_no_totals(self, big_roster_box_score, theme, options):
        lines = render_box_score(big_roster_box_score.game.away_team, 200, 10, 0, 0, theme, options)
        assert len(lines) == 4
        assert "TOTAL" not in "".join(plain(lines))


class TestOffsets:
    """Tests for vertical and horizontal offsets."""

    def test_roster_offset(self, big_roster_box_score, theme, options):
        lines = render_box_score(big_roster_box_score.game.home_team, 200, 6, 3, 0, theme, options)
        rows = plain(lines)
        assert rows[2].startswith("F.Player3")
        assert rows[3].startswith("F.Player4")
        assert rows[5].startswith("TOTAL")

    def test_roster_offset_past_end_is_clamped(self, big_roster_box_score, theme, options):
        lines = render_box_score(big_roster_box_score.game.home_team, 200, 6, 50, 0, theme, options)
        assert plain(lines)[2].startswith("F.Player11")

    def test_rows_fit_width(self, box_score, theme, options):
        for line in render_box_score(box_score.game.home_team, 40, 10, 0, 0, theme, options):
            assert line.cell_len <= 40

    def test_horizontal_scroll_keeps_name(self, box_score, theme, options):
        lines = render_box_score(box_score.game.home_team, 40, 10, 0, 6, theme, options)
        assert lines[0].plain.startswith("PLAYER")
        assert lines[0].plain[16:19] == "FGM"
        assert lines[2].plain.startswith("L.James")


class TestDecoration:
    """Tests for leader, plus/minus and badge styling."""

    def test_undecorated_rows_have_no_styles(self, box_score, theme):
        options = DisplayOptions(decoration=False)
        row = render_box_score(box_score.game.home_team, 200, 10, 0, 0, theme, options)[2]
        assert row.spans == []

    def test_decorated_plus_minus_and_leaders(self, box_score, theme, options):
        row = render_box_score(box_score.game.home_team, 200, 10, 0, 0, theme, options)[2]
        styles = [span.style for span in row.spans]
        assert theme.positive in styles
        assert theme.bold in styles

    def test_negative_plus_minus(self, box_score, theme, options):
        row = render_box_score(box_score.game.away_team, 200, 10, 0, 0, theme, options)[2]
        assert theme.negative in [span.style for span in row.spans]

    def test_badges_off_by_default(self, theme, options):
        team = TeamSnapshot(
            players=(Player("Nikola", "Jokic", 1, PlayerStatistics(points=25, rebounds=12, assists=11)),)
        )
        row = render_box_score(team, 200, 10, 0, 0, theme, options)[2]
        assert row.plain.startswith("N.Jokic")

    def test_badge_prefix_and_emphasis(self, theme):
        team = TeamSnapshot(
            players=(Player("Nikola", "Jokic", 1, PlayerStatistics(points=25, rebounds=12, assists=11)),)
        )
        options = DisplayOptions(badges=True)
        row = render_box_score(team, 200, 10, 0, 0, theme, options)[2]
        assert row.plain.startswith("👑N.Jokic")
        assert theme.underline in [span.style for span in row.spans]
