RESEARCH_TEMPLATE = """
As an Advanced AI Alpha-Generation Investment Research Agent for Sequoia AG, analyze {ticker} using the comprehensive framework provided. Focus on high-tech companies and provide:

1. **Executive Summary** with contrarian thesis and differentiated recommendation
2. **Financial Analysis** including 5-year trends and cash flow assessment
3. **Competitive Positioning** and sustainable advantages analysis
4. **Valuation Analysis** using multiple methods with scenarios
5. **Risk Assessment** including hidden risks and mitigation strategies
6. **Alpha Generation Thesis** with specific contrarian drivers
7. **Final Recommendation** (Strong Buy/Buy/Hold/Sell/Strong Sell) with conviction level

Apply contrarian thinking, challenge consensus views, and identify opportunities others might miss. Provide institutional-grade analysis with specific price targets and time horizons.

Respond with a structured JSON object containing both a detailed analysis and a concise executive summary suitable for quick decision-making.

Structure the response as:
{{
  "ticker": "{ticker}",
  "analysis_date": "current date",
  "executive_summary": {{
    "recommendation": "Strong Buy/Buy/Hold/Sell/Strong Sell",
    "target_price": "number",
    "current_price": "number",
    "conviction_level": "High/Medium/Low",
    "key_thesis": "2-3 sentence contrarian thesis",
    "primary_catalysts": ["catalyst1", "catalyst2", "catalyst3"],
    "key_risks": ["risk1", "risk2", "risk3"],
    "time_horizon": "6-12 months"
  }},
  "detailed_analysis": {{
    "financial_analysis": "detailed financial assessment",
    "competitive_positioning": "competitive advantage analysis",
    "valuation_analysis": "valuation methods and scenarios",
    "risk_assessment": "comprehensive risk analysis",
    "alpha_thesis": "specific alpha generation opportunities",
    "contrarian_insights": "market bias identification and exploitation"
  }}
}}

DO NOT OUTPUT ANYTHING OTHER THAN VALID JSON. Ensure all JSON is properly formatted and valid.
"""


def build_research_prompt(ticker: str) -> str:
    return RESEARCH_TEMPLATE.format(ticker=ticker.strip().upper())
