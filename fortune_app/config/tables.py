"""
Static lookup tables for the fortune engine.

All tables are immutable and built once at import time. Keys are the enums
from fortune_app.models so lookups never depend on display strings.
"""

from types import MappingProxyType

from ..models.fortune import (
    BaseFortune,
    Element,
    FortuneLevel,
    NumberTrait,
    Period,
    ZodiacSign,
    ZodiacTrait,
)

PERIOD_LABELS = MappingProxyType({
    Period.TODAY: "今日",
    Period.TOMORROW: "明日",
    Period.THIS_YEAR: "今年",
    Period.NEXT_YEAR: "来年",
})

PERIOD_SUBTITLES = MappingProxyType({
    Period.TODAY: "いま、この瞬間の流れ",
    Period.TOMORROW: "一歩先のヒント",
    Period.THIS_YEAR: "1年を通したテーマ",
    Period.NEXT_YEAR: "次のステージの予感",
})

ZODIAC_TRAITS = MappingProxyType({
    ZodiacSign.ARIES: ZodiacTrait(Element.FIRE, "はじまり・直感"),
    ZodiacSign.TAURUS: ZodiacTrait(Element.EARTH, "安心・豊かさ"),
    ZodiacSign.GEMINI: ZodiacTrait(Element.AIR, "会話・好奇心"),
    ZodiacSign.CANCER: ZodiacTrait(Element.WATER, "共感・ぬくもり"),
    ZodiacSign.LEO: ZodiacTrait(Element.FIRE, "自己表現・情熱"),
    ZodiacSign.VIRGO: ZodiacTrait(Element.EARTH, "整える力・誠実さ"),
    ZodiacSign.LIBRA: ZodiacTrait(Element.AIR, "調和・バランス"),
    ZodiacSign.SCORPIO: ZodiacTrait(Element.WATER, "深いつながり・集中"),
    ZodiacSign.SAGITTARIUS: ZodiacTrait(Element.FIRE, "冒険・学び"),
    ZodiacSign.CAPRICORN: ZodiacTrait(Element.EARTH, "目標・責任感"),
    ZodiacSign.AQUARIUS: ZodiacTrait(Element.AIR, "ひらめき・自由"),
    ZodiacSign.PISCES: ZodiacTrait(Element.WATER, "やさしさ・想像力"),
})

# (sign, (start_month, start_day), (end_month, end_day)), both ends inclusive.
# Every range starts in one month and ends in the next.
ZODIAC_RANGES = (
    (ZodiacSign.ARIES, (3, 21), (4, 19)),
    (ZodiacSign.TAURUS, (4, 20), (5, 20)),
    (ZodiacSign.GEMINI, (5, 21), (6, 21)),
    (ZodiacSign.CANCER, (6, 22), (7, 22)),
    (ZodiacSign.LEO, (7, 23), (8, 22)),
    (ZodiacSign.VIRGO, (8, 23), (9, 22)),
    (ZodiacSign.LIBRA, (9, 23), (10, 23)),
    (ZodiacSign.SCORPIO, (10, 24), (11, 22)),
    (ZodiacSign.SAGITTARIUS, (11, 23), (12, 21)),
    (ZodiacSign.CAPRICORN, (12, 22), (1, 19)),
    (ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
    (ZodiacSign.PISCES, (2, 19), (3, 20)),
)

# Index order is fixed: the seed selects FORTUNE_TABLE[seed % 5]
FORTUNE_TABLE = (
    BaseFortune(
        level=FortuneLevel.DAIKICHI,
        keyword="はじまり",
        color="#f97373",
        message="新しいことを始めるのにぴったりな一日。小さな一歩が、思わぬチャンスにつながりそう。",
    ),
    BaseFortune(
        level=FortuneLevel.KICHI,
        keyword="調和",
        color="#fb923c",
        message="あなたの優しさが周りにひろがる日。人とのつながりを大切にすると、運気がふんわり上昇。",
    ),
    BaseFortune(
        level=FortuneLevel.CHUKICHI,
        keyword="集中",
        color="#22c55e",
        message="やるべきことに静かに集中できそう。丁寧に積み重ねた時間が、自信を育ててくれます。",
    ),
    BaseFortune(
        level=FortuneLevel.SHOKICHI,
        keyword="余白",
        color="#38bdf8",
        message="少しゆっくりめのリズムが心地よい日。がんばりすぎず、自分を甘やかす時間も大切に。",
    ),
    BaseFortune(
        level=FortuneLevel.KYO,
        keyword="リセット",
        color="#a855f7",
        message="うまくいかないことがあっても、今日は「リセットの日」。深呼吸をして、心のスペースを空けてみて。",
    ),
)

LIFE_PATH_TRAITS = MappingProxyType({
    1: NumberTrait(
        keyword="はじまり・リーダー気質",
        message="自ら決めて一歩踏み出すことで運が開ける数字です。迷うよりも、まずは小さく動いてみることが鍵になります。",
    ),
    2: NumberTrait(
        keyword="調和・サポート",
        message="人との関わりの中で力を発揮する数字です。ひとりで抱え込まず、信頼できる人と気持ちを分かち合うことで流れが整います。",
    ),
    3: NumberTrait(
        keyword="表現・楽しさ",
        message="アイデアや感性を外に出すほど運が巡りやすい数字です。好きなこと・楽しいことを遠慮せず取り入れてみましょう。",
    ),
    4: NumberTrait(
        keyword="安定・基盤づくり",
        message="土台を固めることに向いた数字です。生活リズムや環境を整えるほど、安心して次のステップに進めるタイミングになります。",
    ),
    5: NumberTrait(
        keyword="変化・自由",
        message="環境の変化や新しい出会いを通じて成長する数字です。同じ場所にとどまるよりも、小さな冒険を受け入れてみると良さそうです。",
    ),
    6: NumberTrait(
        keyword="愛情・ケア",
        message="身近な人や自分自身を大切にすると運が整う数字です。完璧でなくてよいので、「ほどよい優しさ」を意識してみてください。",
    ),
    7: NumberTrait(
        keyword="探求・内省",
        message="ひとりの時間の中で答えを見つけやすい数字です。情報を追いかけすぎず、静かな時間に自分の本音を聞いてみましょう。",
    ),
    8: NumberTrait(
        keyword="結果・達成",
        message="これまでの行動が現実の形になりやすい数字です。数字や成果を意識しつつも、長期的なバランスも忘れずに進めていきましょう。",
    ),
    9: NumberTrait(
        keyword="完了・手放し",
        message="一区切りつけることで新しい流れが入りやすい数字です。抱えすぎているものがあれば、「いま手放せるものはどれか」を見直してみてください。",
    ),
})

NAME_ENERGY_TRAITS = MappingProxyType({
    1: NumberTrait(
        keyword="切り開く力",
        message="自分の意志を通す場面で強さが出やすい名前です。遠慮しすぎず、必要な場面でははっきり伝えることが吉となります。",
    ),
    2: NumberTrait(
        keyword="受けとめる力",
        message="相手の気持ちを汲み取る感性を持つ名前です。ただし抱え込みすぎには注意。境界線を引く意識も大切になります。",
    ),
    3: NumberTrait(
        keyword="華やかさ",
        message="場の空気を明るくする性質を帯びた名前です。少しだけ自分を表に出すことで、良縁を引き寄せやすくなります。",
    ),
    4: NumberTrait(
        keyword="粘り強さ",
        message="コツコツ継続する力が宿りやすい名前です。すぐに結果を求めすぎず、小さな積み重ねを大事にすると安定していきます。",
    ),
    5: NumberTrait(
        keyword="柔軟さ",
        message="変化にしなやかに対応できる名前です。予定通りにいかないときこそ、「別の選択肢もあり」と視野を広げてみてください。",
    ),
    6: NumberTrait(
        keyword="面倒見の良さ",
        message="人のために動くことで運を受け取りやすい名前です。ただし自己犠牲にならないよう、自分のケアも同じくらい大切に。",
    ),
    7: NumberTrait(
        keyword="洞察力",
        message="物事の本質を見抜こうとする力が宿る名前です。ひとり静かに考える時間を確保すると、直感が冴えやすくなります。",
    ),
    8: NumberTrait(
        keyword="現実を動かす力",
        message="行動力と成果を結びつけやすい名前です。具体的な目標や数字を決めることで、運の流れが読みやすくなります。",
    ),
    9: NumberTrait(
        keyword="包み込む力",
        message="広い受容性を持つ名前です。人や状況を丸ごと受けとめやすい一方で、自分の限界もきちんと知っておくと、心が軽くなります。",
    ),
})

SEASONAL_DEMOTIONS = MappingProxyType({
    FortuneLevel.DAIKICHI: FortuneLevel.CHUKICHI,
    FortuneLevel.KICHI: FortuneLevel.SHOKICHI,
})

EARLY_YEAR_MESSAGE = (
    "特に1〜5月ごろまでは、無理にスピードを上げるよりも、足元を整える意識を持つと"
    "流れが安定しやすいタイミングです。前半は「準備と調整」、後半に向けてじっくり"
    "整えていくつもりで動いてみてください。"
)

ZODIAC_SENTENCE = "{period_label}の{zodiac}のあなたは、「{zodiac_keyword}」の流れが少し強まりやすいタイミングです。"
LIFE_PATH_SENTENCE = "生年月日からみたライフパスナンバーは「{number}」。{message}"
NAME_ENERGY_SENTENCE = "お名前の画数エネルギー番号は「{number}」。{message}"
