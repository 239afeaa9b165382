from qrisk.risk_scores.coefficients import Coefficients
from qrisk.risk_scores.transforms import FractionalPolynomial, Transform

# Coefficients from the QRISK2-2015 open source release (ClinRisk Ltd.)
# Both genders have two BMI terms and diabetes type 1 as a separate factor.

VERSION = "2015"
NAME = "QRISK2-2015"


TRANSFORM_FEMALE = Transform(
    age=(FractionalPolynomial(0.5), FractionalPolynomial(1)),
    bmi=(FractionalPolynomial(-2), FractionalPolynomial(-2, times_log=True)),
)

TRANSFORM_MALE = Transform(
    age=(FractionalPolynomial(-1), FractionalPolynomial(2)),
    bmi=(FractionalPolynomial(-2), FractionalPolynomial(-2, times_log=True)),
)


COEFFICIENTS_FEMALE = Coefficients(
    mean_age_1=2.086397409439087,
    mean_age_2=4.353054523468018,
    mean_bmi_1=0.152244374155998,
    mean_bmi_2=0.143282383680344,
    mean_ratio=3.50665545463562,
    mean_systolic_bp=125.0400390625,
    mean_townsend=0.416743695735931,
    ethnicity=(
        0,
        0,
        0.25740993498319259,
        0.61297954305717794,
        0.33621598416696213,
        0.15125173032243364,
        -0.17941562596577681,
        -0.35034236100577454,
        -0.27783724832332168,
        -0.1592734122665366,
    ),
    smoking=(
        0,
        0.21193771087603852,
        0.66186343796859415,
        0.75707145871323056,
        0.9496298251457036,
    ),
    age_1=4.4417863976316578,
    age_2=0.028163721067299918,
    bmi_1=0.89423653047106633,
    bmi_2=-6.5748047596104335,
    ratio=0.14339005616214209,
    systolic_bp=0.012897179584361372,
    townsend=0.066477263001143885,
    atrial_fibrillation=1.6284780236484424,
    rheumatoid_arthritis=0.29012331040887707,
    renal_disease=1.0043796680368302,
    treated_hypertension=0.61804305627881295,
    diabetes_type1=1.8400348250874599,
    diabetes_type2=1.1711626412196512,
    family_history=0.51472612036651955,
    age_1_times_smoking=(
        0.74644061443916665,
        0.25685417118796666,
        -1.5452226707866523,
        -1.7113013709043405,
    ),
    age_1_times_atrial_fibrillation=-7.0177986441269269,
    age_1_times_renal_disease=-2.968401925645439,
    age_1_times_treated_hypertension=-4.2219906452967848,
    age_1_times_diabetes_type1=1.683576954604008,
    age_1_times_diabetes_type2=-2.9371798540034648,
    age_1_times_bmi_1=0.17971962070446823,
    age_1_times_bmi_2=40.242816676065814,
    age_1_times_family_history=0.14399792407539067,
    age_1_times_systolic_bp=-0.036257523389977446,
    age_1_times_townsend=0.37351380314334426,
    age_2_times_smoking=(
        -0.1927057741748231,
        -0.15269650634589327,
        0.23135639765214294,
        0.23071650138682967,
    ),
    age_2_times_atrial_fibrillation=1.1395776028337732,
    age_2_times_renal_disease=0.43569632083309406,
    age_2_times_treated_hypertension=0.72659471088872396,
    age_2_times_diabetes_type1=-0.63209777662756539,
    age_2_times_diabetes_type2=0.40232704348710868,
    age_2_times_bmi_1=0.13192766227118777,
    age_2_times_bmi_2=-7.3211322435546409,
    age_2_times_family_history=-0.13302600182737204,
    age_2_times_systolic_bp=0.0045842850495397955,
    age_2_times_townsend=-0.095237030084599078,
    baseline_survival=(
        0,
        0.999128758907318,
        0.998222172260284,
        0.997292637825012,
        0.996305286884308,
        0.995250642299652,
        0.994234919548035,
        0.993183135986328,
        0.992080569267273,
        0.99092823266983,
        0.989747583866119,
        0.988448619842529,
        0.987112879753113,
        0.985681176185608,
        0.984169244766235,
        0.982512056827545,
    ),
)

COEFFICIENTS_MALE = Coefficients(
    mean_age_1=0.233734160661697,
    mean_age_2=18.304403305053711,
    mean_bmi_1=0.146269768476486,
    mean_bmi_2=0.140587374567986,
    mean_ratio=4.321151256561279,
    mean_systolic_bp=130.58975219726562,
    mean_townsend=0.551009356975555,
    ethnicity=(
        0,
        0,
        0.31733214304819191,
        0.47385907860811155,
        0.51713146559681455,
        0.13703011573664192,
        -0.38855223049726639,
        -0.38124954853121945,
        -0.40644613816509945,
        -0.22857155213773361,
    ),
    smoking=(
        0,
        0.26844791581580202,
        0.63076749738775917,
        0.71780788833786957,
        0.87041725334654851,
    ),
    age_1=-18.043731255037727,
    age_2=0.023648645425430694,
    bmi_1=2.5388084343581578,
    bmi_2=-9.1034725871528597,
    ratio=0.16843976361369095,
    systolic_bp=0.010500308938075482,
    townsend=0.032380163763448759,
    atrial_fibrillation=1.0363048000259454,
    rheumatoid_arthritis=0.25199531347910126,
    renal_disease=0.8359352886995286,
    treated_hypertension=0.66034596959178626,
    diabetes_type1=1.3309170433446138,
    diabetes_type2=0.94543488927744179,
    family_history=0.59860378971362815,
    age_1_times_smoking=(
        0.61868646993796839,
        1.5522017055600055,
        2.4407210657517648,
        3.5140494491884624,
    ),
    age_1_times_atrial_fibrillation=8.0382925558108482,
    age_1_times_renal_disease=-1.6389521229064483,
    age_1_times_treated_hypertension=8.4621771382346651,
    age_1_times_diabetes_type1=5.4977016563835504,
    age_1_times_diabetes_type2=3.397474748876669,
    age_1_times_bmi_1=33.84898810127676,
    age_1_times_bmi_2=-140.67070254048971,
    age_1_times_family_history=2.0858333154353321,
    age_1_times_systolic_bp=0.050128366883072054,
    age_1_times_townsend=-0.19882682171868507,
    age_2_times_smoking=(
        -0.0040893975066796338,
        -0.0056065852346001768,
        -0.0018261006189440492,
        -0.001499715729617329,
    ),
    age_2_times_atrial_fibrillation=0.0052471594895864343,
    age_2_times_renal_disease=-0.017966358619354639,
    age_2_times_treated_hypertension=0.0092088445323379176,
    age_2_times_diabetes_type1=0.0047493510223424558,
    age_2_times_diabetes_type2=-0.0048113775783491563,
    age_2_times_bmi_1=0.062741075751394565,
    age_2_times_bmi_2=-0.23829149093857321,
    age_2_times_family_history=-0.004997114921328101,
    age_2_times_systolic_bp=-0.000052370098795143509,
    age_2_times_townsend=-0.0012518116569283104,
    baseline_survival=(
        0,
        0.998205721378326,
        0.996380507946014,
        0.994511783123016,
        0.992520809173584,
        0.990338504314423,
        0.988223373889923,
        0.98605340719223,
        0.983751118183136,
        0.981297850608826,
        0.97879421710968,
        0.976175725460052,
        0.973336458206177,
        0.970354199409485,
        0.967230498790741,
        0.963918387889862,
    ),
)
