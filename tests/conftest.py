import pytest

from unigen.emoji.classify import classify
from unigen.emoji.codepoints import parse_key
from unigen.emoji.parser import RawSequenceRecord

EMOJI_TEST = """\
# emoji-test.txt
# Date: 2023-06-05, 21:39:54 GMT
# Version: 15.1
#
# Emoji Keyboard/Display Test Data for UTS #51
#
# Format:
#   code points; status # emoji name

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face
263A FE0F                                              ; fully-qualified     # ☺️ E0.6 smiling face
263A                                                   ; unqualified         # ☺ E0.6 smiling face

# Smileys & Emotion subtotal:		3

# group: People & Body

# subgroup: hand-fingers-open
270B                                                   ; fully-qualified     # ✋ E0.6 raised hand
270B 1F3FB                                             ; fully-qualified     # ✋🏻 E1.0 raised hand: light skin tone
270B 1F3FF                                             ; fully-qualified     # ✋🏿 E1.0 raised hand: dark skin tone

# subgroup: hand-fingers-partial
261D FE0F                                              ; fully-qualified     # ☝️ E0.6 index pointing up
261D                                                   ; unqualified         # ☝ E0.6 index pointing up
261D 1F3FB                                             ; fully-qualified     # ☝🏻 E1.0 index pointing up: light skin tone

# subgroup: person
1F9D1                                                  ; fully-qualified     # 🧑 E5.0 person
1F9D1 1F3FB                                            ; fully-qualified     # 🧑🏻 E5.0 person: light skin tone
1F468                                                  ; fully-qualified     # 👨 E0.6 man

# subgroup: person-gesture
1F937                                                  ; fully-qualified     # 🤷 E4.0 person shrugging
1F937 1F3FB                                            ; fully-qualified     # 🤷🏻 E4.0 person shrugging: light skin tone
1F937 200D 2642 FE0F                                   ; fully-qualified     # 🤷‍♂️ E4.0 man shrugging
1F937 200D 2642                                        ; minimally-qualified # 🤷‍♂ E4.0 man shrugging
1F937 1F3FB 200D 2642 FE0F                             ; fully-qualified     # 🤷🏻‍♂️ E4.0 man shrugging: light skin tone
1F937 200D 2640 FE0F                                   ; fully-qualified     # 🤷‍♀️ E4.0 woman shrugging

# subgroup: person-role
1F9D1 200D 2695 FE0F                                   ; fully-qualified     # 🧑‍⚕️ E12.1 health worker
1F9D1 1F3FB 200D 2695 FE0F                             ; fully-qualified     # 🧑🏻‍⚕️ E12.1 health worker: light skin tone
1F468 200D 2695 FE0F                                   ; fully-qualified     # 👨‍⚕️ E4.0 man health worker
1F468 200D 2695                                        ; minimally-qualified # 👨‍⚕ E4.0 man health worker
1F469 1F3FD 200D 2695 FE0F                             ; fully-qualified     # 👩🏽‍⚕️ E4.0 woman health worker: medium skin tone

# subgroup: family
1F9D1 200D 1F91D 200D 1F9D1                            ; fully-qualified     # 🧑‍🤝‍🧑 E12.0 people holding hands
1F9D1 1F3FB 200D 1F91D 200D 1F9D1 1F3FB                ; fully-qualified     # 🧑🏻‍🤝‍🧑🏻 E12.0 people holding hands: light skin tone
1F9D1 1F3FB 200D 1F91D 200D 1F9D1 1F3FF                ; fully-qualified     # 🧑🏻‍🤝‍🧑🏿 E12.1 people holding hands: light skin tone, dark skin tone
1F48F                                                  ; fully-qualified     # 💏 E0.6 kiss
1F48F 1F3FB                                            ; fully-qualified     # 💏🏻 E13.1 kiss: light skin tone
1F468 200D 1F469 200D 1F466                            ; fully-qualified     # 👨‍👩‍👦 E2.0 family: man, woman, boy

# People & Body subtotal:		25

# group: Symbols

# subgroup: keycap
0023 FE0F 20E3                                         ; fully-qualified     # #️⃣ E0.6 keycap: #
0023 20E3                                              ; unqualified         # #⃣ E0.6 keycap: #

# subgroup: gender
2640 FE0F                                              ; fully-qualified     # ♀️ E4.0 female sign
2640                                                   ; unqualified         # ♀ E4.0 female sign

# group: Flags

# subgroup: country-flag
1F1E8 1F1E6                                            ; fully-qualified     # 🇨🇦 E2.0 flag: Canada

# subgroup: subdivision-flag
1F3F4 E0067 E0062 E0065 E006E E0067 E007F              ; fully-qualified     # 🏴󠁧󠁢󠁥󠁮󠁧󠁿 E5.0 flag: England

#EOF
"""

CLDR_XML = """\
<?xml version="1.0" encoding="UTF-8" ?>
<ldml>
	<identity>
		<version number="$Revision$"/>
		<language type="en"/>
	</identity>
	<annotations>
		<annotation cp="😀">face | grin | grinning face</annotation>
		<annotation cp="😀" type="tts">grinning face</annotation>
		<annotation cp="☺">face | outlined | relaxed | smile | smiling face</annotation>
		<annotation cp="☺" type="tts">smiling face</annotation>
		<annotation cp="✋">hand | high 5 | high five | raised hand</annotation>
		<annotation cp="🤷">doubt | ignorance | indifference | person shrugging | shrug</annotation>
		<annotation cp="🧑‍⚕">doctor | health worker | healthcare | nurse | therapist</annotation>
		<annotation cp="🧑‍⚕" type="tts">health worker</annotation>
		<annotation cp="#⃣">keycap</annotation>
		<annotation cp="🇨🇦">flag | Canada</annotation>
	</annotations>
</ldml>
"""


@pytest.fixture
def emoji_test_text():
    return EMOJI_TEST


@pytest.fixture
def cldr_xml():
    return CLDR_XML


@pytest.fixture
def make_record():
    """Build a RawSequenceRecord from an emoji-test style hex string."""
    def _make(hex_cps, name, group="People & Body", subgroup="person", line_no=1):
        return RawSequenceRecord(
            code_points=parse_key(hex_cps),
            name=name,
            qualification="fully-qualified",
            group=group,
            subgroup=subgroup,
            line_no=line_no,
        )
    return _make


@pytest.fixture
def make_classified(make_record):
    def _make(hex_cps, name, **kwargs):
        return classify(make_record(hex_cps, name, **kwargs))
    return _make
