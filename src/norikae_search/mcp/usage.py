"""Guidance text shown to MCP clients for the route search tool."""

USAGE_PROMPT_NAME = "norikae-usage"
USAGE_PROMPT_DESCRIPTION = (
    "Instructions for using the Japanese train route search tool"
)

SEARCH_ROUTE_TITLE = "乗り換え検索"

SEARCH_ROUTE_DESCRIPTION = """Search train routes between stations in Japan using Yahoo! Transit.

IMPORTANT: Station names MUST be in Japanese kanji/kana. Convert before calling:

English → Japanese:
- Tokyo → 東京, Shinjuku → 新宿, Shibuya → 渋谷, Ikebukuro → 池袋
- Ueno → 上野, Akihabara → 秋葉原, Ginza → 銀座, Roppongi → 六本木
- Yokohama → 横浜, Osaka → 大阪, Kyoto → 京都
- Narita Airport → 成田空港, Haneda Airport → 羽田空港

Chinese (Simplified/Traditional) → Japanese kanji:
- 东京/東京 → 東京, 新宿 → 新宿, 涩谷/澀谷 → 渋谷
- 秋叶原/秋葉原 → 秋葉原, 横滨/橫濱 → 横浜
Japanese kanji may differ from Chinese hanzi (e.g. 渋 vs 涩/澀).

Examples:
- "Tokyo to Shinjuku" → from: "東京", to: "新宿"
- "从东京到新宿" → from: "東京", to: "新宿"
- "Shibuya to Ikebukuro via Harajuku" → from: "渋谷", to: "池袋", via: ["原宿"]

Options summary:
- timeType: departure(出発), arrival(到着), first_train(始発), last_train(終電), unspecified(指定なし)
- ticket: ic(ICカード), cash(きっぷ)
- seatPreference: non_reserved(自由席), reserved(指定席), green(グリーン車)
- walkSpeed: fast(急いで), slightly_fast(少し急いで), slightly_slow(少しゆっくり), slow(ゆっくり)
- sortBy: time(到着が早い順), transfer(乗換回数順), fare(料金安い順)
- useAirline, useShinkansen, useExpress, useHighwayBus, useLocalBus, useFerry: true/false"""

USAGE_GUIDE = """# 乗換案内MCP 使用ガイド / Norikae MCP Usage Guide

## 重要 / Important
- 駅名は必ず日本語（漢字・かな）で入力してください
- Station names MUST be in Japanese kanji/kana
- Convert English AND Chinese station names to Japanese before calling

## 英語→日本語 / English → Japanese
| English | Japanese |
|---------|----------|
| Tokyo | 東京 |
| Shinjuku | 新宿 |
| Shibuya | 渋谷 |
| Ikebukuro | 池袋 |
| Ueno | 上野 |
| Akihabara | 秋葉原 |
| Ginza | 銀座 |
| Roppongi | 六本木 |
| Harajuku | 原宿 |
| Yokohama | 横浜 |
| Osaka | 大阪 |
| Kyoto | 京都 |
| Narita Airport | 成田空港 |
| Haneda Airport | 羽田空港 |

## 中国語→日本語 / Chinese → Japanese
Japanese kanji may differ from Chinese hanzi:
| 简体/繁體 | 日本語 |
|-----------|--------|
| 东京/東京 | 東京 |
| 涩谷/澀谷 | 渋谷 |
| 秋叶原/秋葉原 | 秋葉原 |
| 横滨/橫濱 | 横浜 |

## 使用例 / Usage Examples
User: "How do I get from Tokyo to Shinjuku?"
→ Call search_route with: from="東京", to="新宿"

User: "東京から渋谷まで表参道経由で"
→ Call search_route with: from="東京", to="渋谷", via=["表参道"]"""
