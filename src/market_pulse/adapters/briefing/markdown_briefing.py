"""Markdown market briefing generator."""

from market_pulse.core import BriefingGenerator, Item, PipelineResult
from market_pulse.core.scoring import summarize_market


class MarkdownBriefingGenerator(BriefingGenerator):
    """Generate a markdown briefing from ranked articles."""

    SECTIONS = (
        ("high", "## 🔴 High impact"),
        ("medium", "## 🟠 Medium impact"),
        ("low", "## ⚪ Low impact"),
    )

    def generate(self, result: PipelineResult) -> str:
        """Generate markdown briefing."""
        stamp = result.generated_at.strftime("%d.%m.%Y %H:%M UTC")

        if not result.items:
            return f"# Market briefing {stamp}\n\nNo articles available."

        lines = [f"# 📈 Market briefing {stamp}", ""]

        if result.error:
            lines.extend([f"> ⚠️ {result.error}", ""])

        # Items arrive ranked, so each section keeps that order
        for level, heading in self.SECTIONS:
            entries = [i for i in result.items if i.derived_scores["marketImpact"] == level]
            if not entries:
                continue
            lines.extend([heading, ""])
            for item in entries:
                lines.extend(self._format_entry(item))

        summary = summarize_market(result.items, result.generated_at)
        lines.extend([
            "## Market summary",
            "",
            f"Articles: {len(result.items)} | "
            f"Sentiment: {summary['overallSentiment']} | "
            f"Impact level: {summary['marketImpactLevel']}",
        ])

        return "\n".join(lines)

    def _format_entry(self, item: Item) -> list[str]:
        """Format single briefing entry."""
        scores = item.derived_scores
        lines = [
            f"### [{item.payload['title']}]({item.payload.get('url', item.identity)})",
            "",
            f"**Sentiment:** {scores['sentiment']} | **Urgency:** {scores['urgency']:.0%}",
            "",
        ]

        if item.payload.get("description"):
            lines.extend([item.payload["description"], ""])

        if scores["tradingImplications"]:
            lines.extend(["**Trading implications:**", ""])
            for implication in scores["tradingImplications"]:
                lines.append(f"- {implication}")
            lines.append("")

        if scores["relatedAssets"]:
            assets = ", ".join(f"{a['symbol']} ({a['type']})" for a in scores["relatedAssets"])
            lines.append(f"*{item.payload.get('sourceName', item.source)} | {assets}*")
            lines.append("")

        lines.append("---")
        lines.append("")

        return lines
